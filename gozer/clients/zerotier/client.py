"""ZeroTier Central API client.

Wraps the handful of read-only endpoints gozer needs: the networks owned by
the account, a single network, a network's member collection and a single
member. Requests are made one at a time.

Example:
    ```python
    config = ClientConfig(token="...")
    async with ZeroTierClient(config) as client:
        networks = await client.list_networks()
        for network in networks:
            members = await client.get_network_member_details(network, online_only=True)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from json import dumps as json_dumps
from operator import attrgetter

from gozer.cli.console import log
from gozer.constants import (
    API_NETWORK_DETAIL,
    API_NETWORK_MEMBER_DETAIL,
    API_NETWORK_MEMBERS,
    API_NETWORKS,
)
from gozer.exceptions import RequestError, SchemaError
from gozer.index import DuplicatePolicy, NetworkList
from gozer.models import MemberRef, Network, NetworkMember

from .transport import ZeroTierTransport


@dataclass(slots=True)
class ZeroTierClient(ZeroTierTransport):
    """Client for the ZeroTier Central API.

    Use it as an async context manager so the HTTP session is closed when
    done.
    """

    duplicate_policy: DuplicatePolicy = field(default=DuplicatePolicy.LAST)

    async def list_networks(self, echo: bool = False) -> NetworkList:
        """Fetch all networks owned by the authenticated account.

        Args:
            echo: Print each network's summary to stdout as it's indexed

        Returns:
            The networks in service order, indexed by name and ID

        Raises:
            RequestError: If the request fails.
            SchemaError: If the response isn't a list of networks.
        """
        log.debug("Listing networks")
        payload = await self.get_json(API_NETWORKS)
        # An empty body means no networks
        if payload is None:
            payload = []
        if not isinstance(payload, list):
            msg = f"Expected a list of networks, got {type(payload).__name__}"
            raise SchemaError(msg)

        networks = NetworkList(tuple(Network.from_json(item) for item in payload), self.duplicate_policy)
        if echo:
            for network in networks:
                print(network.summary())
        return networks

    async def get_network_details(self, network_id: str) -> Network:
        """Fetch a single network.

        Returns:
            The network, in the same form as returned by `list_networks`

        Raises:
            RequestError: If the request fails.
        """
        log.debug("Getting network %s", network_id)
        payload = await self.get_json(API_NETWORK_DETAIL.format(network_id=network_id))
        return Network.from_json({} if payload is None else payload)

    async def get_network_members(self, network_id: str) -> list[MemberRef]:
        """Fetch the member collection of a network.

        Returns:
            One reference per member, carrying the raw entry

        Raises:
            RequestError: If the request fails.
            SchemaError: If the response isn't a list of objects.
        """
        log.debug("Getting members of network %s", network_id)
        payload = await self.get_json(API_NETWORK_MEMBERS.format(network_id=network_id))
        if payload is None:
            payload = []
        if not isinstance(payload, list):
            msg = f"Expected a list of members, got {type(payload).__name__}"
            raise SchemaError(msg)
        return [MemberRef.from_json(item) for item in payload]

    async def get_member_detail(self, network_id: str, member_id: str) -> NetworkMember:
        """Fetch one member of a network, including its name and addresses.

        Returns:
            The member

        Raises:
            RequestError: If the request fails.
        """
        log.debug("Getting member %s of network %s", member_id, network_id)
        payload = await self.get_json(
            API_NETWORK_MEMBER_DETAIL.format(network_id=network_id, member_id=member_id)
        )
        return NetworkMember.from_json({} if payload is None else payload)

    async def get_network_member_details(
        self, network: Network, online_only: bool = False
    ) -> list[NetworkMember]:
        """Fetch full details of every member of a network, sorted by name.

        Failures are logged rather than raised: if the member collection can't
        be fetched the result is empty, and a member whose details can't be
        fetched is left out.

        Args:
            network: The network to resolve members for
            online_only: Leave out members that aren't online

        Returns:
            The members, sorted by name

        Raises:
            SchemaError: If a member entry has no address.
        """
        log.debug("Resolving members of network %s", network.id)
        try:
            refs = await self.get_network_members(network.id)
        except RequestError as e:
            log.error("Can't list members of network %s: %s", network.id, e)
            return []
        member_ids = [ref.address for ref in refs]

        members: list[NetworkMember] = []
        for member_id in member_ids:
            try:
                member = await self.get_member_detail(network.id, member_id)
            except RequestError as e:
                # A member that can't be fetched can't be shown to be online
                if online_only:
                    log.debug("Skipping member %s: %s", member_id, e)
                else:
                    log.error("Can't get member %s of network %s: %s", member_id, network.id, e)
                continue
            if online_only and not member.online:
                continue
            log.debug("%s %s", member_id, json_dumps(member.as_dict(), indent=2))
            members.append(member)

        # sorted() is stable, so equal names keep their fetch order
        return sorted(members, key=attrgetter("name"))
