"""Command line interface components for gozer.

This module provides the console and logging setup, argument parsing, report
output and the main entry point of the gozer command.
"""

from __future__ import annotations

from .args import parse_args
from .console import console, log, set_verbosity
from .files import FileWriter
from .main import main

__all__ = [
    "FileWriter",
    "console",
    "log",
    "main",
    "parse_args",
    "set_verbosity",
]
