"""qwuri - RFC 6570 URI Templates

Parse a template such as ``http://foo.com{/foo,bar}{?q}`` once, then expand
it against any number of variable mappings.
"""

from qwuri._version import __version__
from qwuri.ast import Expression, Literal, Operator, Part, Variable, parse
from qwuri.exceptions import (
    InternalInconsistencyError,
    InvalidTemplateError,
    NoTemplateError,
    QwuriError,
    TemplateNotFoundError,
    UnsupportedValueKindError,
)
from qwuri.template import Template, expand

__all__ = [
    "__version__",
    # Core
    "Template",
    "expand",
    "parse",
    # Parts
    "Expression",
    "Literal",
    "Operator",
    "Part",
    "Variable",
    # Errors
    "InternalInconsistencyError",
    "InvalidTemplateError",
    "NoTemplateError",
    "QwuriError",
    "TemplateNotFoundError",
    "UnsupportedValueKindError",
]
