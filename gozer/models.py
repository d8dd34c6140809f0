"""Data model for ZeroTier networks and their members.

Only the fields gozer actually uses are decoded; everything else in the API
responses is ignored. Missing keys fall back to empty values so that sparse
responses (new members without a name, networks without pools) still decode.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any, Self

from .constants import MEMBER_NAME_WIDTH
from .exceptions import SchemaError

if TYPE_CHECKING:
    from .types import JSON_TYPE


def _require_object(data: JSON_TYPE, what: str) -> dict[str, Any]:
    """Return data as a dict, or raise if it isn't a JSON object.

    Raises:
        SchemaError: If data is not a JSON object.
    """
    if not isinstance(data, dict):
        msg = f"Expected a JSON object for {what}, got {type(data).__name__}"
        raise SchemaError(msg)
    return data


def _text(value: Any) -> str:
    """Coerce a JSON value to a string, treating null as empty."""
    return "" if value is None else str(value)


@dataclass(slots=True, frozen=True)
class IPAssignmentPool:
    """A range of addresses handed out to members of a network."""

    ip_range_start: str
    ip_range_end: str

    @classmethod
    def from_json(cls, data: JSON_TYPE) -> Self:
        """Decode a pool from the API representation.

        Returns:
            The decoded pool
        """
        data = _require_object(data, "IP assignment pool")
        return cls(
            ip_range_start=_text(data.get("ipRangeStart")),
            ip_range_end=_text(data.get("ipRangeEnd")),
        )


@dataclass(slots=True, frozen=True)
class NetworkConfig:
    """Configuration block of a network."""

    name: str = ""
    private: bool = False
    ip_assignment_pools: tuple[IPAssignmentPool, ...] = field(default=())

    @classmethod
    def from_json(cls, data: JSON_TYPE) -> Self:
        """Decode a network configuration from the API representation.

        Returns:
            The decoded configuration
        """
        data = _require_object(data or {}, "network config")
        return cls(
            name=_text(data.get("name")),
            private=bool(data.get("private")),
            ip_assignment_pools=tuple(
                IPAssignmentPool.from_json(pool) for pool in data.get("ipAssignmentPools") or ()
            ),
        )


@dataclass(slots=True, frozen=True)
class Network:
    """A single ZeroTier network."""

    id: str
    description: str = ""
    config: NetworkConfig = field(default_factory=NetworkConfig)

    @property
    def name(self) -> str:
        """Human-readable network name."""
        return self.config.name

    @classmethod
    def from_json(cls, data: JSON_TYPE) -> Self:
        """Decode a network from the API representation.

        Returns:
            The decoded network
        """
        data = _require_object(data, "network")
        return cls(
            id=_text(data.get("id")),
            description=_text(data.get("description")),
            config=NetworkConfig.from_json(data.get("config")),
        )

    def summary(self) -> str:
        """One-line summary of the network.

        Returns:
            The ID, name and description separated by spaces
        """
        return f"{self.id} {self.name} {self.description}"

    def as_dict(self) -> dict[str, Any]:
        """Convert the network to a dictionary.

        Returns:
            Dictionary representation of the network
        """
        return asdict(self)


@dataclass(slots=True, frozen=True)
class MemberConfig:
    """Authorisation state of a network member."""

    authorized: bool = False
    active_bridge: bool = False
    ip_assignments: tuple[str, ...] = field(default=())

    @classmethod
    def from_json(cls, data: JSON_TYPE) -> Self:
        """Decode a member configuration from the API representation.

        Returns:
            The decoded configuration
        """
        data = _require_object(data or {}, "member config")
        return cls(
            authorized=bool(data.get("authorized")),
            active_bridge=bool(data.get("activeBridge")),
            ip_assignments=tuple(_text(ip) for ip in data.get("ipAssignments") or ()),
        )


@dataclass(slots=True, frozen=True)
class NetworkMember:
    """A device that has joined a network."""

    network_id: str
    node_id: str
    name: str = ""
    description: str = ""
    online: bool = False
    hidden: bool = False
    config: MemberConfig = field(default_factory=MemberConfig)

    @classmethod
    def from_json(cls, data: JSON_TYPE) -> Self:
        """Decode a member from the API representation.

        Returns:
            The decoded member
        """
        data = _require_object(data, "network member")
        return cls(
            network_id=_text(data.get("networkId")),
            node_id=_text(data.get("nodeId")),
            name=_text(data.get("name")),
            description=_text(data.get("description")),
            online=bool(data.get("online")),
            hidden=bool(data.get("hidden")),
            config=MemberConfig.from_json(data.get("config")),
        )

    @property
    def flags(self) -> list[str]:
        """State flags worth drawing attention to, in display order."""
        flags = []
        if not self.config.authorized:
            flags.append("Unauthorized")
        if self.config.active_bridge:
            flags.append("Bridged")
        if self.hidden:
            flags.append("Hidden")
        if not self.online:
            flags.append("Offline")
        return flags

    def summary(self) -> str:
        """One-line summary of the member, followed by any state flags.

        Returns:
            The tab-indented summary line
        """
        ips = " ".join(self.config.ip_assignments)
        summary = f"\t{self.name:<{MEMBER_NAME_WIDTH}} {self.node_id} [{ips}]\t{self.description}"
        return " ".join([summary, *self.flags])

    def as_dict(self) -> dict[str, Any]:
        """Convert the member to a dictionary.

        Returns:
            Dictionary representation of the member
        """
        return asdict(self)


@dataclass(slots=True, frozen=True)
class MemberRef:
    """An entry of a network's member collection.

    The collection endpoint returns large, loosely documented objects. Only the
    member address is needed from them, so the raw mapping is kept as-is and
    the address is read on demand.
    """

    raw: dict[str, Any]

    @classmethod
    def from_json(cls, data: JSON_TYPE) -> Self:
        """Wrap one entry of the member collection.

        Returns:
            The wrapped entry
        """
        return cls(raw=_require_object(data, "member collection entry"))

    @property
    def address(self) -> str:
        """The member's node address, from `config.address`.

        Raises:
            SchemaError: If the entry has no `config.address` string.
        """
        config = self.raw.get("config")
        address = config.get("address") if isinstance(config, dict) else None
        if not isinstance(address, str):
            msg = f"Member entry has no config.address: {self.raw!r}"
            raise SchemaError(msg)
        return address
