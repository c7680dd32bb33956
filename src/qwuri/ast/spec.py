"""Parsed template structure: literals, expressions, variables and operators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class Operator(str, Enum):
    """RFC 6570 expression operators. Simple expansion has no operator."""

    RESERVED = "+"
    FRAGMENT = "#"
    LABEL = "."
    PATH = "/"
    PATH_PARAM = ";"
    QUERY = "?"
    QUERY_CONTINUATION = "&"

    @property
    def prefix(self) -> str:
        """Prepended once to a non-empty expansion."""
        return "" if self is Operator.RESERVED else self.value

    @property
    def joiner(self) -> str:
        if self in (Operator.RESERVED, Operator.FRAGMENT):
            return ","
        if self in (Operator.QUERY, Operator.QUERY_CONTINUATION):
            return "&"
        return self.value

    @property
    def named(self) -> bool:
        """Whether each variable renders as ``name=value``."""
        return self in (
            Operator.PATH_PARAM,
            Operator.QUERY,
            Operator.QUERY_CONTINUATION,
        )

    @property
    def allows_reserved(self) -> bool:
        """Whether reserved characters in scalar values pass through unescaped."""
        return self not in (Operator.QUERY, Operator.QUERY_CONTINUATION)


@dataclass(frozen=True)
class Literal:
    """A run of template text outside any expression."""

    text: str


@dataclass(frozen=True)
class Variable:
    """A variable specifier inside an expression, e.g. ``x:3`` or ``list*``."""

    name: str
    max_length: Optional[int] = None
    explode: bool = False

    def __str__(self) -> str:
        if self.explode:
            return f"{self.name}*"
        if self.max_length is not None:
            return f"{self.name}:{self.max_length}"
        return self.name


@dataclass(frozen=True)
class Expression:
    """One ``{...}`` block: an optional operator and its variables."""

    operator: Optional[Operator]
    variables: Tuple[Variable, ...]

    def __str__(self) -> str:
        op = self.operator.value if self.operator is not None else ""
        return "{" + op + ",".join(str(v) for v in self.variables) + "}"


Part = Union[Literal, Expression]
