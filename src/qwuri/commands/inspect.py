"""Inspect command - show how a template parses"""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from qwuri.ast.spec import Expression, Literal
from qwuri.exceptions import QwuriError
from qwuri.template import Template

from .utils import console, handle_error


def inspect_command(template: str) -> None:
    """Print the parsed parts of TEMPLATE as a table."""
    tmpl = Template(template)
    try:
        parts = tmpl.parts()
    except QwuriError as e:
        handle_error(e)

    table = Table()
    table.add_column("#", style="dim")
    table.add_column("Kind")
    table.add_column("Operator", style="magenta")
    table.add_column("Content", style="cyan")

    for i, part in enumerate(parts):
        if isinstance(part, Literal):
            table.add_row(str(i), "literal", "", escape(repr(part.text)))
        elif isinstance(part, Expression):
            op = part.operator.value if part.operator is not None else ""
            variables = ", ".join(str(v) for v in part.variables)
            table.add_row(str(i), "expression", op, escape(variables))

    console.print(table)
    names = ", ".join(tmpl.variable_names()) or "(none)"
    console.print(f"Variables: {escape(names)}", highlight=False)
