"""Client configuration and API token resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from os.path import expandvars
from pathlib import Path
from typing import TYPE_CHECKING

from .cli.console import log
from .constants import API_URL
from .exceptions import ConfigError

if TYPE_CHECKING:
    from argparse import Namespace as Arguments


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """Settings needed to talk to the ZeroTier API."""

    token: str = field(repr=False)
    base_url: str = field(default=API_URL)

    def __post_init__(self) -> None:
        """Validate the configuration.

        Raises:
            ConfigError: If the token or base URL is empty.
        """
        if not self.token:
            msg = "No API token supplied"
            raise ConfigError(msg)
        if not self.base_url:
            msg = "No API URL supplied"
            raise ConfigError(msg)
        # Endpoint paths start with a slash
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))


def read_token_file(path: Path) -> str | None:
    """Read an API token from a file.

    Environment variables and `~` in the path are expanded.

    Returns:
        The trimmed token, or None if the file doesn't exist

    Raises:
        OSError: If the file exists but can't be read.
    """
    token_path = Path(expandvars(str(path))).expanduser()
    try:
        return token_path.read_text().strip()
    except FileNotFoundError:
        log.info("No token file %s", token_path)
        return None


def resolve_token(token: str | None, token_file: Path | None) -> str:
    """Pick the API token, preferring one given literally over the token file.

    Returns:
        The API token

    Raises:
        ConfigError: If neither source provides a token.
    """
    if not token and token_file is not None:
        token = read_token_file(token_file)
    if not token:
        msg = "No API token supplied"
        raise ConfigError(msg)
    return token


def load_config(args: Arguments) -> ClientConfig:
    """Build the client configuration from parsed command line arguments.

    Returns:
        The client configuration
    """
    return ClientConfig(
        token=resolve_token(args.api_token, args.api_token_file),
        base_url=args.api_url,
    )
