"""Constants for gozer."""

from __future__ import annotations

from pathlib import Path
from typing import Any

# ZeroTier Central API constants

API_URL = "https://my.zerotier.com/api"
API_NETWORKS = "/network"
API_NETWORK_DETAIL = "/network/{network_id}"
API_NETWORK_MEMBERS = "/network/{network_id}/member"
API_NETWORK_MEMBER_DETAIL = "/network/{network_id}/member/{member_id}"

HTTP_OK = 200
MEMBER_NAME_WIDTH = 25  # Column width for member names in summaries

# CLI constants

DEFAULT_TOKEN_FILE = Path("~") / ".gozer-token"

CLI_ARGUMENTS: dict[str, list[tuple[Any]]] = {
    "authentication": [
        (["--api-token"], {"help": "ZeroTier API token", "metavar": "TOKEN"}),
        (
            ["--api-token-file"],
            {
                "default": DEFAULT_TOKEN_FILE,
                "help": "File containing ZeroTier API token",
                "metavar": f"<{DEFAULT_TOKEN_FILE}>",
                "type": Path,
            },
        ),
        (["--api-url"], {"default": API_URL, "help": "ZeroTier API base URL", "metavar": f"<{API_URL}>"}),
    ],
    "members": [
        (["--online"], {"action": "store_true", "help": "Show only online network members"}),
    ],
    "files": [
        (["-o", "--output"], {"help": "Output file path (default: stdout)", "type": Path}),
        (
            ["-of", "--output-format"],
            {
                "choices": ["csv", "json", "plain", "xlsx"],
                "default": "plain",
                "metavar": "csv|json|<plain>|xlsx",
            },
        ),
    ],
    "logging": [
        (["-v", "--verbose"], {"action": "count", "default": 0, "help": "Increase log verbosity"}),
    ],
}
CLI_HELP_DESCRIPTION: str = """Gozer: summarise ZeroTier networks and their members.

Lists the networks owned by your ZeroTier account, or the networks named on
the command line (by name or ID), and prints each one followed by its members
sorted by name. Members are flagged as Unauthorized, Bridged, Hidden or
Offline where that applies.
"""
CLI_HELP_EPILOGUE: str | None = "If an argument has a default, it's shown in <parentheses>."
CLI_HELP_NAME: str = "gozer"
