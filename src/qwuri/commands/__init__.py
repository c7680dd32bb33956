"""CLI commands"""

from .expand import expand_command
from .inspect import inspect_command
from .render import render_command

__all__ = ["expand_command", "inspect_command", "render_command"]
