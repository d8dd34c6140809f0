"""Console and logging configuration module for gozer.

Logs are rendered by Rich on stderr so they never mix with the report, which
is written to stdout.
"""

from __future__ import annotations

import logging
from logging import INFO, getLogger

from rich.console import Console
from rich.logging import RichHandler

# Create a Rich console for log output
console = Console(stderr=True)

# Configure logging with the Rich handler
logging.basicConfig(
    level=INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=console, rich_tracebacks=True, show_time=True)],
    force=True,
)

# Get the logger for the package
log = getLogger("gozer")


def set_verbosity(verbose: int) -> None:
    """Set the package log level from a `-v` count."""
    if verbose >= 2:  # noqa: PLR2004
        log.setLevel("DEBUG")
    elif verbose == 1:
        log.setLevel("INFO")
    else:
        log.setLevel("WARNING")
