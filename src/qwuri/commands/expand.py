"""Expand command - expand a template string given on the command line"""

from __future__ import annotations

import logging
from typing import Optional

import typer

from qwuri.exceptions import QwuriError
from qwuri.template import Template

from .utils import handle_error, parse_var_options

log = logging.getLogger(__name__)


def expand_command(template: str, var: Optional[list[str]] = None) -> None:
    """Expand TEMPLATE with the given variables and print the result."""
    vars = parse_var_options(var)
    log.info("Expanding %s with %d variables", template, len(vars))

    try:
        result = Template(template).process(vars)
    except QwuriError as e:
        handle_error(e)

    typer.echo(result)
