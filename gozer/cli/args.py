"""Command line argument parser for gozer.

Arguments are declared in groups in `gozer.constants.CLI_ARGUMENTS`; the
positional list of networks is added here.
"""

from __future__ import annotations

from argparse import (
    ArgumentParser,
    Namespace as Arguments,
    RawDescriptionHelpFormatter as Formatter,
)
from sys import argv as sys_argv

from gozer.constants import (
    CLI_ARGUMENTS,
    CLI_HELP_DESCRIPTION,
    CLI_HELP_EPILOGUE,
    CLI_HELP_NAME,
)

from .console import set_verbosity


def build_parser() -> ArgumentParser:
    """Create the gozer argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    # Create the parser
    parser = ArgumentParser(
        description=CLI_HELP_DESCRIPTION,
        epilog=CLI_HELP_EPILOGUE,
        prog=CLI_HELP_NAME,
        formatter_class=Formatter,
    )
    # Add groups and arguments
    for category_name, args in CLI_ARGUMENTS.items():
        category = parser.add_argument_group(category_name)
        [category.add_argument(*flags, **kwargs) for flags, kwargs in args]

    parser.add_argument(
        "networks",
        nargs="*",
        metavar="NETWORK",
        help="Network names or IDs to show (default: all networks on the account)",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> Arguments:
    """Parse the command line and apply the requested log verbosity.

    Args:
        argv: Arguments to parse instead of the process arguments

    Returns:
        The parsed arguments
    """
    parser = build_parser()

    # Run the parser
    parsed_args = parser.parse_args(sys_argv[1:] if argv is None else argv)

    # Writing a spreadsheet to stdout isn't useful
    if parsed_args.output_format == "xlsx" and parsed_args.output is None:
        parser.error("--output-format xlsx requires --output")

    # Handle verbosity
    set_verbosity(parsed_args.verbose)

    # Return the parsed arguments
    return parsed_args
