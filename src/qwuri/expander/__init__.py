"""Expansion engine and percent-encoding."""

from qwuri.expander.encoding import encode_component, encode_reserved
from qwuri.expander.engine import RenderedValue, get_value, process

__all__ = [
    "RenderedValue",
    "encode_component",
    "encode_reserved",
    "get_value",
    "process",
]
