"""Main entry point for gozer CLI."""

from __future__ import annotations

from sys import exit as sys_exit
from typing import TYPE_CHECKING

from gozer.clients.zerotier import ZeroTierClient
from gozer.config import load_config
from gozer.exceptions import ConfigError, DuplicateNetworkError, RequestError, SchemaError

from .args import parse_args
from .console import log
from .files import FileWriter
from .report import NetworkReport, not_found_line

if TYPE_CHECKING:
    from argparse import Namespace as Arguments


async def resolve_targets(client: ZeroTierClient, names: list[str]) -> list[tuple[str, str]]:
    """Work out which networks to show.

    With no names, every network on the account is shown in service order.
    Names are matched against the network index by ID and then by name; a
    name that doesn't match is assumed to be an ID.

    Returns:
        Pairs of (argument as given, network ID)

    Raises:
        RequestError: If no names were given and the networks can't be listed.
        DuplicateNetworkError: If no names were given and the index rejects the list.
    """
    if not names:
        networks = await client.list_networks()
        return [(network_id, network_id) for network_id in networks.ids]
    try:
        networks = await client.list_networks()
    except (DuplicateNetworkError, RequestError, SchemaError) as e:
        log.warning("Can't list networks, treating arguments as IDs: %s", e)
        return [(name, name) for name in names]
    return [(name, network.id if (network := networks.find(name)) else name) for name in names]


async def show_networks(
    client: ZeroTierClient, targets: list[tuple[str, str]], online_only: bool, echo: bool
) -> list[NetworkReport]:
    """Fetch each network and its members, printing them as they arrive if asked.

    A network that can't be fetched is reported as NOT FOUND and skipped.

    Returns:
        One report per network that was found
    """
    reports: list[NetworkReport] = []
    for arg, network_id in targets:
        # Get the information for the network
        try:
            network = await client.get_network_details(network_id)
        except (RequestError, SchemaError) as e:
            print(not_found_line(arg, e))
            continue
        if echo:
            print(network.summary())

        # Get the members of the network
        try:
            members = await client.get_network_member_details(network, online_only=online_only)
        except SchemaError:
            log.exception("Unexpected member data for network %s", network.id)
            members = []
        report = NetworkReport(network, members)
        if echo:
            for line in report.lines()[1:]:
                print(line)
        reports.append(report)
    return reports


def write_reports(args: Arguments, reports: list[NetworkReport]) -> None:
    """Write the collected reports in the requested format."""
    match args.output_format:
        case "plain":
            data = [line for report in reports for line in report.lines()]
        case "json":
            data = [report.as_dict() for report in reports]
        case _:
            data = [row for report in reports for row in report.rows()]
    FileWriter(path=args.output, type=args.output_format, data=data)
    if args.output is not None:
        log.info("Wrote %d network(s) to %s", len(reports), args.output)


async def main(argv: list[str] | None = None) -> None:
    """Main entry point for gozer CLI."""
    args = parse_args(argv)

    try:
        config = load_config(args)
    except ConfigError as e:
        log.critical("%s", e)
        sys_exit(1)
    except OSError as e:
        log.critical("Cannot read token file: %s", e)
        sys_exit(1)

    # Plain text to stdout is printed as it arrives, anything else at the end
    echo = args.output is None and args.output_format == "plain"

    async with ZeroTierClient(config) as client:
        try:
            targets = await resolve_targets(client, args.networks)
        except (DuplicateNetworkError, RequestError, SchemaError) as e:
            log.critical("Network request failed: %s", e)
            sys_exit(1)
        log.info("Showing detail for: %s", [network_id for _, network_id in targets])
        reports = await show_networks(client, targets, online_only=args.online, echo=echo)

    if not echo:
        write_reports(args, reports)
