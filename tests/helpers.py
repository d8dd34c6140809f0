"""Sample API payloads and a fake ZeroTier API shared by the tests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from aiohttp import web

TOKEN = "test-token"  # noqa: S105

HOME_ID = "8056c2e21c000001"
OFFICE_ID = "8056c2e21c000002"


def network_json(network_id: str, name: str, description: str = "") -> dict[str, Any]:
    """Build a network as returned by the API."""
    return {
        "id": network_id,
        "description": description,
        "config": {
            "name": name,
            "private": True,
            "ipAssignmentPools": [{"ipRangeStart": "10.147.17.1", "ipRangeEnd": "10.147.17.254"}],
        },
    }


def member_json(
    network_id: str,
    node_id: str,
    name: str,
    *,
    online: bool = True,
    authorized: bool = True,
    bridged: bool = False,
    hidden: bool = False,
    ips: list[str] | None = None,
    description: str = "",
) -> dict[str, Any]:
    """Build a member as returned by the API."""
    return {
        "networkId": network_id,
        "nodeId": node_id,
        "name": name,
        "description": description,
        "online": online,
        "hidden": hidden,
        "config": {
            "authorized": authorized,
            "activeBridge": bridged,
            "ipAssignments": ips or [],
            "address": node_id,
        },
    }


@dataclass
class FakeZeroTier:
    """Serves canned responses keyed by request path."""

    routes: dict[str, tuple[int, str]] = field(default_factory=dict)
    seen: list[tuple[str, dict[str, str]]] = field(default_factory=list)
    base_url: str = ""

    def add(self, path: str, payload: Any, status: int = 200) -> None:
        """Serve a JSON payload for an API path."""
        self.add_raw(path, json.dumps(payload), status)

    def add_raw(self, path: str, body: str, status: int = 200) -> None:
        """Serve a raw body for an API path."""
        self.routes[f"/api{path}"] = (status, body)

    def add_network(self, network: dict[str, Any], members: list[dict[str, Any]]) -> None:
        """Serve a network, its member collection and each member's details."""
        network_id = network["id"]
        self.add(f"/network/{network_id}", network)
        self.add(f"/network/{network_id}/member", [{"config": member["config"]} for member in members])
        for member in members:
            self.add(f"/network/{network_id}/member/{member['nodeId']}", member)

    async def handle(self, request: web.Request) -> web.Response:
        """Answer a request from the route table, or with a 404."""
        self.seen.append((request.path, dict(request.headers)))
        status, body = self.routes.get(request.path, (404, '{"message": "not found"}'))
        return web.Response(status=status, text=body, content_type="application/json")
