"""QWURI Exceptions

Custom exceptions for URI template parsing and expansion.
"""

from __future__ import annotations

from typing import Any


class QwuriError(Exception):
    """Base exception for all qwuri errors."""

    pass


class NoTemplateError(QwuriError):
    """Raised when parts are requested before a template string was set."""

    def __init__(self) -> None:
        super().__init__("Template is not defined")


class InvalidTemplateError(QwuriError):
    """Raised when a template string does not match the URI template grammar."""

    def __init__(self, template: str, position: int, reason: str):
        self.template = template
        self.position = position
        self.reason = reason
        super().__init__(
            f"Invalid template {template!r} at position {position}: {reason}"
        )


class UnsupportedValueKindError(QwuriError):
    """Raised when a variable value is of a kind the engine cannot expand."""

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(
            f"Unsupported value for variable '{name}': {type(value).__name__}"
        )


class InternalInconsistencyError(QwuriError):
    """Raised when a parsed part is of an unknown kind at render time."""

    def __init__(self, part: Any):
        self.part = part
        super().__init__(
            f"Unexpected object of type {type(part).__name__} found in parsed template"
        )


class TemplateNotFoundError(QwuriError):
    """Raised when a named template is missing from the config."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Template not found: {name}")
