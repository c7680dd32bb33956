"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler

from qwuri.exceptions import QwuriError

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the qwuri CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (--verbose): INFO level
    - Debug (QWURI_DEBUG=1): DEBUG level - shows parse and cache activity
    """
    debug = bool(os.environ.get("QWURI_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("qwuri")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def parse_var_options(options: list[str] | None) -> dict[str, Any]:
    """Turn repeated ``name=value`` options into a variable mapping.

    A name given more than once becomes a list value, in option order.
    """
    result: dict[str, Any] = {}
    for option in options or []:
        name, sep, value = option.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"expected name=value, got {option!r}")

        if name not in result:
            result[name] = value
        elif isinstance(result[name], list):
            result[name].append(value)
        else:
            result[name] = [result[name], value]
    return result


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Handle and exit on qwuri errors."""
    if isinstance(error, QwuriError):
        exit_with_error(str(error))
    # Unexpected error
    typer.echo(f"Unexpected error: {error}", err=True)
    sys.exit(1)
