"""Tests for argument parsing, report rendering and the main CLI flow."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

import gozer
from gozer.cli import main, parse_args
from gozer.cli.console import log
from gozer.cli.main import resolve_targets
from gozer.cli.report import NetworkReport, not_found_line
from gozer.clients.zerotier import ZeroTierClient
from gozer.config import ClientConfig
from gozer.constants import API_URL, DEFAULT_TOKEN_FILE
from gozer.exceptions import DuplicateNetworkError
from gozer.index import DuplicatePolicy
from gozer.models import Network, NetworkMember
from helpers import HOME_ID, OFFICE_ID, TOKEN, member_json, network_json

if TYPE_CHECKING:
    from pathlib import Path

    from helpers import FakeZeroTier


def member_line(member: dict) -> str:
    """Render a member JSON payload as the CLI prints it."""
    return "     " + NetworkMember.from_json(member).summary()


@pytest.fixture
def two_networks(fake_api: FakeZeroTier) -> FakeZeroTier:
    """Fixture serving an account with two networks and their members."""
    home = network_json(HOME_ID, "home", "Home")
    office = network_json(OFFICE_ID, "office", "Office")
    fake_api.add("/network", [home, office])
    fake_api.add_network(
        home,
        [
            member_json(HOME_ID, "bbbbbbbbbb", "tv", online=False, ips=["10.147.17.9"]),
            member_json(HOME_ID, "aaaaaaaaaa", "laptop", ips=["10.147.17.5"]),
        ],
    )
    fake_api.add_network(office, [member_json(OFFICE_ID, "cccccccccc", "router", bridged=True)])
    return fake_api


def test_parse_args_defaults() -> None:
    """Test the defaults of every option."""
    args = parse_args([])

    if args.networks != [] or args.online or args.api_token is not None:
        pytest.fail(f"Unexpected defaults: {args}")
    if args.api_token_file != DEFAULT_TOKEN_FILE or args.api_url != API_URL:
        pytest.fail(f"Unexpected token defaults: {args}")
    if args.output is not None or args.output_format != "plain":
        pytest.fail(f"Unexpected output defaults: {args}")


def test_parse_args_networks_and_flags() -> None:
    """Test positional networks and flags are parsed."""
    args = parse_args(["--online", "--api-token", "abc", "home", HOME_ID])

    if args.networks != ["home", HOME_ID] or not args.online or args.api_token != "abc":
        pytest.fail(f"Unexpected arguments: {args}")


def test_parse_args_verbosity() -> None:
    """Test -v raises the log level."""
    parse_args(["-vv"])
    if log.level != 10:  # noqa: PLR2004
        pytest.fail(f"Expected DEBUG, got {log.level}")
    parse_args([])
    if log.level != 30:  # noqa: PLR2004
        pytest.fail(f"Expected WARNING, got {log.level}")


def test_parse_args_xlsx_requires_output() -> None:
    """Test XLSX output to stdout is refused."""
    with pytest.raises(SystemExit):
        parse_args(["-of", "xlsx"])


def test_report_lines() -> None:
    """Test a report renders the network, indented members and a blank line."""
    network = Network.from_json(network_json(HOME_ID, "home", "Home"))
    member = NetworkMember.from_json(member_json(HOME_ID, "aaaaaaaaaa", "laptop"))

    lines = NetworkReport(network, [member]).lines()

    if lines != [f"{HOME_ID} home Home", "     " + member.summary(), ""]:
        pytest.fail(f"Unexpected lines: {lines}")


def test_not_found_line() -> None:
    """Test the line printed for a missing network."""
    if not_found_line("nowhere", ValueError("404 Not Found")) != "nowhere NOT FOUND 404 Not Found":
        pytest.fail("Unexpected NOT FOUND line")


@pytest.mark.asyncio
async def test_main_all_networks(two_networks: FakeZeroTier, capsys: pytest.CaptureFixture[str]) -> None:
    """Test all networks are shown in service order, members sorted by name."""
    await main(["--api-token", TOKEN, "--api-url", two_networks.base_url])

    expected = [
        f"{HOME_ID} home Home",
        member_line(member_json(HOME_ID, "aaaaaaaaaa", "laptop", ips=["10.147.17.5"])),
        member_line(member_json(HOME_ID, "bbbbbbbbbb", "tv", online=False, ips=["10.147.17.9"])),
        "",
        f"{OFFICE_ID} office Office",
        member_line(member_json(OFFICE_ID, "cccccccccc", "router", bridged=True)),
        "",
    ]
    if capsys.readouterr().out.splitlines() != expected:
        pytest.fail("Unexpected report output")


@pytest.mark.asyncio
async def test_main_online_only(two_networks: FakeZeroTier, capsys: pytest.CaptureFixture[str]) -> None:
    """Test --online hides offline members."""
    await main(["--api-token", TOKEN, "--api-url", two_networks.base_url, "--online", "home"])

    out = capsys.readouterr().out
    if "tv" in out or "laptop" not in out or "office" in out:
        pytest.fail(f"Unexpected output: {out!r}")


@pytest.mark.asyncio
async def test_main_unknown_network_continues(
    two_networks: FakeZeroTier, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test an unknown network is reported and the next one is still shown."""
    await main(["--api-token", TOKEN, "--api-url", two_networks.base_url, "ffffffffffffffff", "office"])

    lines = capsys.readouterr().out.splitlines()
    if lines[0] != "ffffffffffffffff NOT FOUND 404 Not Found":
        pytest.fail(f"Unexpected first line: {lines[0]!r}")
    if lines[1] != f"{OFFICE_ID} office Office":
        pytest.fail(f"Expected the office network next, got {lines[1]!r}")


@pytest.mark.asyncio
async def test_main_ids_used_when_list_fails(fake_api: FakeZeroTier, capsys: pytest.CaptureFixture[str]) -> None:
    """Test arguments are treated as IDs when the network list is unavailable."""
    fake_api.add("/network", {"message": "error"}, status=500)
    fake_api.add_network(network_json(HOME_ID, "home", "Home"), [])

    await main(["--api-token", TOKEN, "--api-url", fake_api.base_url, HOME_ID])

    if capsys.readouterr().out.splitlines() != [f"{HOME_ID} home Home", ""]:
        pytest.fail("Expected the network to be fetched by ID")


@pytest.mark.asyncio
async def test_main_list_failure_is_fatal(fake_api: FakeZeroTier) -> None:
    """Test failing to list networks with no arguments exits."""
    fake_api.add("/network", {"message": "error"}, status=500)

    with pytest.raises(SystemExit) as exc_info:
        await main(["--api-token", TOKEN, "--api-url", fake_api.base_url])

    if exc_info.value.code != 1:
        pytest.fail(f"Expected exit code 1, got {exc_info.value.code}")


@pytest.mark.asyncio
async def test_main_without_token_exits(tmp_path: Path) -> None:
    """Test a missing token is fatal."""
    with pytest.raises(SystemExit) as exc_info:
        await main(["--api-token-file", str(tmp_path / "missing")])

    if exc_info.value.code != 1:
        pytest.fail(f"Expected exit code 1, got {exc_info.value.code}")


@pytest.mark.asyncio
async def test_main_token_from_file(two_networks: FakeZeroTier, tmp_path: Path) -> None:
    """Test the token is read from the token file when not given literally."""
    token_file = tmp_path / "token"
    token_file.write_text(f"{TOKEN}\n")

    await main(["--api-token-file", str(token_file), "--api-url", two_networks.base_url, "office"])

    if two_networks.seen[0][1].get("Authorization") != f"Bearer {TOKEN}":
        pytest.fail("Expected the token from the file to be sent")


@pytest.mark.asyncio
async def test_main_json_output(
    two_networks: FakeZeroTier, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test JSON output nests members under their network."""
    path = tmp_path / "report.json"

    await main(["--api-token", TOKEN, "--api-url", two_networks.base_url, "-o", str(path), "-of", "json"])

    report = json.loads(path.read_text())
    if [network["id"] for network in report] != [HOME_ID, OFFICE_ID]:
        pytest.fail(f"Unexpected networks: {report}")
    if [member["name"] for member in report[0]["members"]] != ["laptop", "tv"]:
        pytest.fail(f"Unexpected members: {report[0]['members']}")
    if capsys.readouterr().out:
        pytest.fail("Expected nothing on stdout when writing to a file")


@pytest.mark.asyncio
async def test_resolve_targets_rejected_duplicates(fake_api: FakeZeroTier) -> None:
    """Test names fall back to IDs when the index rejects duplicate network names."""
    fake_api.add("/network", [network_json(HOME_ID, "shared"), network_json(OFFICE_ID, "shared")])
    config = ClientConfig(token=TOKEN, base_url=fake_api.base_url)

    async with ZeroTierClient(config, duplicate_policy=DuplicatePolicy.REJECT) as client:
        targets = await resolve_targets(client, ["shared", HOME_ID])
        with pytest.raises(DuplicateNetworkError):
            await resolve_targets(client, [])

    if targets != [("shared", "shared"), (HOME_ID, HOME_ID)]:
        pytest.fail(f"Expected arguments to be used as IDs, got {targets}")


def test_duplicate_network_error_exported() -> None:
    """Test the duplicate network error is part of the package interface."""
    if "DuplicateNetworkError" not in gozer.__all__ or gozer.DuplicateNetworkError is not DuplicateNetworkError:
        pytest.fail("Expected DuplicateNetworkError to be exported")
