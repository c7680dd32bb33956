"""Template AST: parsed parts and the parser that builds them."""

from qwuri.ast.parser import parse, variable_names
from qwuri.ast.spec import Expression, Literal, Operator, Part, Variable

__all__ = [
    "Expression",
    "Literal",
    "Operator",
    "Part",
    "Variable",
    "parse",
    "variable_names",
]
