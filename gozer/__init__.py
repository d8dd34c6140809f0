"""Command line client for the ZeroTier Central API.

This package lists the networks owned by a ZeroTier account, fetches each
network's configuration and members, and prints a one-line summary of every
network followed by its members. Members are sorted by name and flagged when
they are unauthorised, bridged, hidden or offline.
"""

from __future__ import annotations

from importlib.metadata import version

from .cli import console, log, main, parse_args
from .clients.zerotier import ZeroTierClient
from .config import ClientConfig
from .exceptions import (
    ConfigError,
    DuplicateNetworkError,
    GozerError,
    RequestError,
    SchemaError,
    ServerError,
)
from .index import DuplicatePolicy, NetworkList
from .models import MemberRef, Network, NetworkConfig, NetworkMember

__all__ = [
    "ClientConfig",
    "ConfigError",
    "DuplicateNetworkError",
    "DuplicatePolicy",
    "GozerError",
    "MemberRef",
    "Network",
    "NetworkConfig",
    "NetworkList",
    "NetworkMember",
    "RequestError",
    "SchemaError",
    "ServerError",
    "ZeroTierClient",
    "console",
    "log",
    "main",
    "parse_args",
]

__version__ = version(__name__)
