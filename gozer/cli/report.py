"""Per-network reports and their plain-text and tabular renderings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gozer.models import Network, NetworkMember

MEMBER_INDENT = "    "


@dataclass(slots=True)
class NetworkReport:
    """A network together with its resolved members."""

    network: Network
    members: list[NetworkMember] = field(default_factory=list)

    def lines(self) -> list[str]:
        """Render the report as plain text lines.

        Returns:
            The network summary, one line per member and a blank separator
        """
        return [
            self.network.summary(),
            *(f"{MEMBER_INDENT} {member.summary()}" for member in self.members),
            "",
        ]

    def as_dict(self) -> dict[str, Any]:
        """Convert the report to a dictionary.

        Returns:
            The network's fields with its members nested under "members"
        """
        return {**self.network.as_dict(), "members": [member.as_dict() for member in self.members]}

    def rows(self) -> list[dict[str, Any]]:
        """Flatten the report to one row per member.

        Returns:
            Rows suitable for CSV or spreadsheet output
        """
        return [
            {
                "network_id": self.network.id,
                "network_name": self.network.name,
                "node_id": member.node_id,
                "name": member.name,
                "description": member.description,
                "ip_assignments": " ".join(member.config.ip_assignments),
                "authorized": member.config.authorized,
                "bridged": member.config.active_bridge,
                "hidden": member.hidden,
                "online": member.online,
            }
            for member in self.members
        ]


def not_found_line(arg: str, error: Exception) -> str:
    """Line printed for a network that couldn't be fetched.

    Returns:
        The argument, the NOT FOUND marker and the error
    """
    return f"{arg} NOT FOUND {error}"
