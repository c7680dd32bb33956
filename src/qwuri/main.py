"""qwuri CLI Main Entry Point

Usage:
    qwuri expand 'http://foo.com{/foo,bar}' -v foo=baz -v bar=quux
    qwuri expand '{?list*}' -v list=a -v list=b     # repeated name -> list
    qwuri inspect '{+path}/here{?q}'                # show parsed parts
    qwuri render repo -v repo=hello                 # named template from qwuri.yaml
    qwuri --version
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from ._version import __version__
from .commands import expand_command, inspect_command, render_command
from .commands.utils import setup_logging

typer_app = typer.Typer(no_args_is_help=True)

VAR_HELP = "Variable as name=value. Repeat a name to pass a list."


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"qwuri {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Show INFO logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """RFC 6570 URI template expansion."""
    setup_logging(verbose)


@typer_app.command("expand")
def expand(
    template: str = typer.Argument(..., help="URI template string."),
    var: Optional[List[str]] = typer.Option(None, "-v", "--var", help=VAR_HELP),
) -> None:
    """Expand a template string."""
    expand_command(template, var)


@typer_app.command("inspect")
def inspect(
    template: str = typer.Argument(..., help="URI template string."),
) -> None:
    """Show the parsed parts of a template."""
    inspect_command(template)


@typer_app.command("render")
def render(
    name: str = typer.Argument(..., help="Template name in qwuri.yaml."),
    var: Optional[List[str]] = typer.Option(None, "-v", "--var", help=VAR_HELP),
    file_path: Optional[Path] = typer.Option(
        None, "-f", "--file", help="Path to qwuri.yaml file."
    ),
) -> None:
    """Expand a named template from qwuri.yaml."""
    render_command(name, var, file_path)


def app() -> None:
    """Entry point for the installed ``qwuri`` script."""
    typer_app()


if __name__ == "__main__":
    app()
