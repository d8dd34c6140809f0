"""Exceptions raised by the gozer client.

`RequestError` covers anything that stops a request from producing a usable
response: connection failures, invalid URLs and unparseable bodies.
`ServerError` is the subclass raised when the service answers with a status
other than 200, so callers that only care whether a fetch worked can catch
`RequestError` alone.
"""

from __future__ import annotations


class GozerError(Exception):
    """Base class for all gozer errors."""


class ConfigError(GozerError):
    """The client configuration is missing or invalid."""


class RequestError(GozerError):
    """A request to the ZeroTier API failed."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        """Store the message and the underlying cause, if any."""
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        """Include the cause in the rendered message."""
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class ServerError(RequestError):
    """The ZeroTier API answered with a non-200 status."""

    def __init__(self, status: int, reason: str | None) -> None:
        """Build the message from the HTTP status line."""
        super().__init__(f"{status} {reason or ''}".strip())
        self.status = status
        self.reason = reason


class SchemaError(GozerError):
    """A decoded response lacks a field the client relies on."""


class DuplicateNetworkError(GozerError):
    """Two networks share a name or ID and the index rejects duplicates."""
