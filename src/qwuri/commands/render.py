"""Render command - expand a named template from qwuri.yaml"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from qwuri.config import QwuriConfig, find_config_file
from qwuri.exceptions import QwuriError

from .utils import exit_with_error, handle_error, parse_var_options

log = logging.getLogger(__name__)


def render_command(
    name: str,
    var: Optional[list[str]] = None,
    file_path: Optional[Path] = None,
) -> None:
    """Expand the template called NAME from the config file."""
    if file_path is None:
        file_path = find_config_file()
        if file_path is None:
            exit_with_error("No qwuri.yaml found in current directory or parents.")
    elif not file_path.exists():
        exit_with_error(f"File not found: {file_path}")

    try:
        config = QwuriConfig.load(file_path)
    except (ValidationError, yaml.YAMLError) as e:
        exit_with_error(f"Invalid config {file_path}: {e}")

    log.info("Loaded %d templates from %s", len(config.templates), file_path)

    try:
        template = config.get_template(name)
        vars = config.resolve_vars(name, parse_var_options(var))
        result = template.process(vars)
    except QwuriError as e:
        handle_error(e)

    typer.echo(result)
