"""Shared fixtures: an in-process fake ZeroTier API and a client pointed at it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from aiohttp import web
from aiohttp.test_utils import TestServer
from helpers import TOKEN, FakeZeroTier
from pytest_asyncio import fixture as asyncio_fixture

from gozer.clients.zerotier import ZeroTierClient
from gozer.config import ClientConfig

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


@asyncio_fixture
async def fake_api() -> AsyncGenerator[FakeZeroTier]:
    """Fixture providing a running fake ZeroTier API."""
    fake = FakeZeroTier()
    app = web.Application()
    app.router.add_route("GET", "/{tail:.*}", fake.handle)
    async with TestServer(app) as server:
        fake.base_url = str(server.make_url("/api"))
        yield fake


@asyncio_fixture
async def client(fake_api: FakeZeroTier) -> AsyncGenerator[ZeroTierClient]:
    """Fixture providing a client pointed at the fake API."""
    config = ClientConfig(token=TOKEN, base_url=fake_api.base_url)
    async with ZeroTierClient(config) as client:
        yield client
