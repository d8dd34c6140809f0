"""Network list with lookup by name or ID."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from .exceptions import DuplicateNetworkError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .models import Network


class DuplicatePolicy(StrEnum):
    """What to do when two networks share an index key."""

    FIRST = "first"  # Keep the earliest network for the key
    LAST = "last"  # Keep the latest network for the key
    REJECT = "reject"  # Raise DuplicateNetworkError


@dataclass(slots=True)
class NetworkList:
    """Networks in service order, indexed by name and by ID.

    The indexes are built once, when the list is created.

    Examples:
        ```python
        networks = NetworkList((home, office))
        networks.find("office")  # by name
        networks.find("8056c2e21c000001")  # by ID
        ```
    """

    networks: tuple[Network, ...]
    policy: DuplicatePolicy = field(default=DuplicatePolicy.LAST)
    by_name: dict[str, Network] = field(init=False, default_factory=dict)
    by_id: dict[str, Network] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        """Build the name and ID indexes."""
        self.networks = tuple(self.networks)
        for network in self.networks:
            self._add(self.by_id, "ID", network.id, network)
            self._add(self.by_name, "name", network.name, network)

    def _add(self, index: dict[str, Network], kind: str, key: str, network: Network) -> None:
        """Add one network to an index, applying the duplicate policy.

        Raises:
            DuplicateNetworkError: If the key is taken and the policy is REJECT.
        """
        if key in index:
            match self.policy:
                case DuplicatePolicy.FIRST:
                    return
                case DuplicatePolicy.REJECT:
                    msg = f"Duplicate network {kind}: {key}"
                    raise DuplicateNetworkError(msg)
        index[key] = network

    def __iter__(self) -> Iterator[Network]:
        """Iterate over networks in service order."""
        return iter(self.networks)

    def __len__(self) -> int:
        """Number of networks in the list."""
        return len(self.networks)

    @property
    def ids(self) -> list[str]:
        """Network IDs in service order."""
        return [network.id for network in self.networks]

    def find(self, key: str) -> Network | None:
        """Look a network up by ID, falling back to its name.

        Returns:
            The matching network, or None if neither index has the key
        """
        return self.by_id.get(key) or self.by_name.get(key)
