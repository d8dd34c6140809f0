"""Authenticated JSON transport for the ZeroTier Central API.

Every API call is a GET returning JSON. The response is decoded before its
status is checked, so error payloads sent alongside a failing status still
show up in the debug log.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from json import JSONDecodeError, JSONDecoder, dumps as json_dumps
from logging import DEBUG
from re import compile as re_compile
from typing import TYPE_CHECKING, Self

from aiohttp import ClientError, ClientSession

from gozer.cli.console import log
from gozer.constants import HTTP_OK
from gozer.exceptions import RequestError, ServerError

if TYPE_CHECKING:
    from gozer.config import ClientConfig
    from gozer.types import JSON_TYPE

_DECODER = JSONDecoder()
_WHITESPACE = re_compile(r"[ \t\n\r]*")


def merge_json(old: JSON_TYPE, new: JSON_TYPE) -> JSON_TYPE:
    """Overlay one decoded JSON value on another.

    Objects are merged key by key, recursively; any other value replaces the
    old one outright.

    Returns:
        The merged value
    """
    if not isinstance(old, dict) or not isinstance(new, dict):
        return new
    merged = dict(old)
    for key, value in new.items():
        merged[key] = merge_json(merged.get(key), value)
    return merged


def decode_json_stream(text: str) -> JSON_TYPE:
    """Decode a body holding one JSON value or several concatenated ones.

    Values are decoded until the input is exhausted and overlaid in order, so
    keys missing from a later object keep the values from an earlier one.

    Returns:
        The merged JSON value, or None if the text is blank

    Raises:
        JSONDecodeError: If the text contains invalid JSON.
    """
    value: JSON_TYPE = None
    index = _WHITESPACE.match(text, 0).end()
    while index < len(text):
        decoded, index = _DECODER.raw_decode(text, index)
        value = merge_json(value, decoded)
        index = _WHITESPACE.match(text, index).end()
    return value


def _log_payload(payload: JSON_TYPE) -> None:
    """Log a decoded payload as indented JSON."""
    if not log.isEnabledFor(DEBUG):
        return
    try:
        pretty = json_dumps(payload, indent=2)
    except (TypeError, ValueError):
        log.warning("JSON pretty print failed", exc_info=True)
    else:
        log.debug("Decoded response\n%s", pretty)


@dataclass(slots=True)
class ZeroTierTransport:
    """Issues authenticated GET requests and decodes their JSON bodies.

    The HTTP session is opened on entering the async context manager (or on
    the first request) and closed by `close()`.
    """

    config: ClientConfig
    session: ClientSession | None = field(default=None, repr=False)

    async def __aenter__(self) -> Self:
        """Open the HTTP session.

        Returns:
            The transport itself
        """
        self._session()
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Close the HTTP session."""
        await self.close()

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.config.token}",
        }

    def _session(self) -> ClientSession:
        """Return the open HTTP session, creating it if needed."""
        if self.session is None or self.session.closed:
            self.session = ClientSession(headers=self.headers)
        return self.session

    async def close(self) -> None:
        """Close the HTTP session if it's open."""
        if self.session is not None and not self.session.closed:
            await self.session.close()
        self.session = None

    async def get_json(self, path: str) -> JSON_TYPE:
        """GET an API path and decode the JSON response.

        Args:
            path: Endpoint path, appended to the configured base URL

        Returns:
            The decoded response body, or None if the body is empty

        Raises:
            RequestError: If the request fails or the body is not JSON.
            ServerError: If the service answers with a status other than 200.
        """
        url = f"{self.config.base_url}{path}"
        log.debug("GET %s", url)

        # Send the request
        try:
            async with self._session().get(url) as response:
                log.debug("Received response %s %s", response.status, response.reason)
                body = (await response.read()).decode("utf-8", errors="replace")
        except (ClientError, TimeoutError) as e:
            msg = f"HTTP request failed: GET {path}"
            raise RequestError(msg, e) from e

        # Decode the body, even if the status says it's an error
        try:
            payload = decode_json_stream(body)
        except JSONDecodeError as e:
            log.debug("Cannot parse response to GET %s:\n%s", path, body)
            if response.status != HTTP_OK:
                raise ServerError(response.status, response.reason) from e
            msg = f"Cannot parse response to GET {path}"
            raise RequestError(msg, e) from e
        _log_payload(payload)

        # Convert server errors to exceptions
        if response.status != HTTP_OK:
            raise ServerError(response.status, response.reason)
        return payload
