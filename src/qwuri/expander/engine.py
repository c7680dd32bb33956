"""Expansion engine - renders parsed template parts against a variable mapping."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any, List, Optional

from qwuri.ast.spec import Expression, Literal, Operator, Part, Variable
from qwuri.exceptions import InternalInconsistencyError, UnsupportedValueKindError
from qwuri.expander.encoding import encode_component, encode_reserved

_SCALARS = (str, int, float, date)


def _scalar_text(value: Any) -> str:
    # date and datetime (as loaded from unquoted YAML) render as ISO 8601
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


@dataclass(frozen=True)
class RenderedValue:
    """A resolved variable value.

    ``pre_encoded`` values (joined lists) are already percent-encoded and
    must not be encoded again by the operator.
    """

    text: str
    pre_encoded: bool = False


def get_value(
    variable: Variable, operator: Optional[Operator], vars: Mapping[str, Any]
) -> Optional[RenderedValue]:
    """Resolve a variable against ``vars``. Returns None when it is undefined."""
    value = vars.get(variable.name)
    if value is None:
        return None

    if isinstance(value, _SCALARS):
        text = _scalar_text(value)
        if variable.max_length:
            text = text[: variable.max_length]
        return RenderedValue(text)

    if isinstance(value, Mapping) or isinstance(value, (bytes, bytearray)):
        raise UnsupportedValueKindError(variable.name, value)

    if isinstance(value, Sequence):
        items: List[str] = []
        for item in value:
            if item is None:
                continue
            if not isinstance(item, _SCALARS):
                raise UnsupportedValueKindError(variable.name, item)
            items.append(encode_component(_scalar_text(item)))
        # An empty list is undefined
        if not items:
            return None
        joiner = operator.value if variable.explode and operator is not None else ","
        return RenderedValue(joiner.join(items), pre_encoded=True)

    raise UnsupportedValueKindError(variable.name, value)


def render_variable(
    variable: Variable, operator: Optional[Operator], vars: Mapping[str, Any]
) -> Optional[str]:
    """Render one variable for ``operator``, or None when it is undefined."""
    resolved = get_value(variable, operator, vars)
    if resolved is None:
        return None

    if resolved.pre_encoded:
        text = resolved.text
    elif operator is not None and operator.allows_reserved:
        text = encode_reserved(resolved.text)
    else:
        text = encode_component(resolved.text)

    if operator is not None and operator.named:
        return f"{variable.name}={text}"
    return text


def render_expression(expression: Expression, vars: Mapping[str, Any]) -> str:
    operator = expression.operator

    rendered: List[str] = []
    for variable in expression.variables:
        text = render_variable(variable, operator, vars)
        if text is not None:
            rendered.append(text)

    if not rendered:
        return ""
    if operator is None:
        return ",".join(rendered)
    return operator.prefix + operator.joiner.join(rendered)


def process(parts: Sequence[Part], vars: Mapping[str, Any]) -> str:
    """Expand ``parts`` in order and concatenate the results.

    Raises:
        UnsupportedValueKindError: A variable holds a mapping or other
            value that cannot be expanded.
        InternalInconsistencyError: A part is neither Literal nor Expression.
    """
    out: List[str] = []
    for part in parts:
        if isinstance(part, Literal):
            out.append(part.text)
        elif isinstance(part, Expression):
            out.append(render_expression(part, vars))
        else:
            raise InternalInconsistencyError(part)
    return "".join(out)
