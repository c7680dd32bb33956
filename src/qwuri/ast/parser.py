"""Recursive-descent parser for RFC 6570 URI templates.

    template    := (literal | expression)*
    literal     := one or more characters other than '{'
    expression  := '{' operator? variable (',' variable)* '}'
    variable    := varname ('*' | ':' digit+)?
    varname     := varchar ('.'? varchar)*
    varchar     := ALPHA | DIGIT | '_' | pct-encoded

One character of lookahead is enough: '{' starts an expression, anything
else starts a literal run which is consumed whole.
"""

from __future__ import annotations

import logging
import string
from typing import List, Optional

from qwuri.ast.spec import Expression, Literal, Operator, Part, Variable
from qwuri.exceptions import InvalidTemplateError

log = logging.getLogger(__name__)

_OPERATORS = {op.value: op for op in Operator}
_VARCHARS = frozenset(string.ascii_letters + string.digits + "_")
_HEXDIGITS = frozenset(string.hexdigits)


class _Parser:
    """Single-use cursor over one template string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def parse(self) -> List[Part]:
        parts: List[Part] = []
        while not self._at_end():
            if self._peek() == "{":
                parts.append(self._expression())
            else:
                parts.append(self._literal())
        return parts

    # -- helpers ------------------------------------------------------------

    def _at_end(self) -> bool:
        return self.pos >= len(self.text)

    def _peek(self, offset: int = 0) -> Optional[str]:
        idx = self.pos + offset
        if idx < len(self.text):
            return self.text[idx]
        return None

    def _fail(self, reason: str) -> InvalidTemplateError:
        return InvalidTemplateError(self.text, self.pos, reason)

    # -- grammar ------------------------------------------------------------

    def _literal(self) -> Literal:
        end = self.text.find("{", self.pos)
        if end == -1:
            end = len(self.text)
        lit = Literal(self.text[self.pos : end])
        self.pos = end
        return lit

    def _expression(self) -> Expression:
        self.pos += 1  # '{'
        if self._at_end():
            raise self._fail("unterminated expression")

        operator = _OPERATORS.get(self._peek())
        if operator is not None:
            self.pos += 1

        variables = [self._variable()]
        while self._peek() == ",":
            self.pos += 1
            variables.append(self._variable())

        ch = self._peek()
        if ch is None:
            raise self._fail("unterminated expression")
        if ch != "}":
            raise self._fail(f"unexpected character {ch!r} in expression")
        self.pos += 1

        return Expression(operator=operator, variables=tuple(variables))

    def _variable(self) -> Variable:
        name = self._varname()

        ch = self._peek()
        if ch == "*":
            self.pos += 1
            variable = Variable(name=name, explode=True)
        elif ch == ":":
            self.pos += 1
            variable = Variable(name=name, max_length=self._max_length())
        else:
            return Variable(name=name)

        if self._peek() in ("*", ":"):
            raise self._fail(f"variable '{name}' has more than one modifier")
        return variable

    def _varname(self) -> str:
        start = self.pos
        while True:
            if not self._varchar():
                if self.pos == start:
                    raise self._fail("expected variable name")
                raise self._fail("variable name cannot end with '.'")
            if self._peek() == ".":
                self.pos += 1
                continue
            if self._peek() in _VARCHARS or self._peek() == "%":
                continue
            return self.text[start : self.pos]

    def _varchar(self) -> bool:
        ch = self._peek()
        if ch is not None and ch in _VARCHARS:
            self.pos += 1
            return True
        if ch == "%":
            hi, lo = self._peek(1), self._peek(2)
            if hi is None or lo is None or hi not in _HEXDIGITS or lo not in _HEXDIGITS:
                raise self._fail("malformed percent-encoding in variable name")
            self.pos += 3
            return True
        return False

    def _max_length(self) -> int:
        start = self.pos
        while self._peek() is not None and self._peek() in string.digits:
            self.pos += 1
        if self.pos == start:
            raise self._fail("prefix modifier requires a length")
        # RFC 6570 max-length is 1..9999
        if self.pos - start > 4:
            raise self._fail("prefix length too long")
        length = int(self.text[start : self.pos], 10)
        if length == 0:
            raise self._fail("prefix length must be positive")
        return length


def parse(text: str) -> List[Part]:
    """Parse a URI template string into literal and expression parts.

    Raises:
        InvalidTemplateError: If the string does not match the grammar in full.
    """
    parts = _Parser(text).parse()
    log.debug("Parsed %r into %d parts", text, len(parts))
    return parts


def variable_names(parts: List[Part]) -> List[str]:
    """Distinct variable names in order of first appearance."""
    seen: dict[str, None] = {}
    for part in parts:
        if isinstance(part, Expression):
            for variable in part.variables:
                seen.setdefault(variable.name, None)
    return list(seen)
