"""Template - owns a template string and its lazily parsed parts."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from qwuri.ast.parser import parse, variable_names
from qwuri.ast.spec import Part
from qwuri.exceptions import NoTemplateError
from qwuri.expander import engine

log = logging.getLogger(__name__)


class Template:
    """An RFC 6570 URI template.

    The template string may be given at construction or assigned later.
    It is parsed on first use and the parts are cached for the lifetime of
    the string; first use is safe to race from several threads.

    Example:
        >>> Template("http://foo.com{/foo,bar}").process(foo="baz", bar="quux")
        'http://foo.com/baz/quux'
    """

    def __init__(self, template: Optional[str] = None):
        self._template = template
        self._parts: Optional[Tuple[Part, ...]] = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Template({self._template!r})"

    @property
    def template(self) -> Optional[str]:
        return self._template

    @template.setter
    def template(self, value: Optional[str]) -> None:
        with self._lock:
            self._template = value
            self._parts = None

    def parts(self) -> Tuple[Part, ...]:
        """Parsed parts, parsing the template on first call.

        Raises:
            NoTemplateError: No template string was set.
            InvalidTemplateError: The template string is malformed.
        """
        parts = self._parts
        if parts is not None:
            return parts

        with self._lock:
            if self._parts is None:
                if self._template is None:
                    raise NoTemplateError()
                self._parts = tuple(parse(self._template))
                log.debug("Cached %d parts for %r", len(self._parts), self._template)
            return self._parts

    def variable_names(self) -> List[str]:
        """Names of all variables referenced by the template."""
        return variable_names(list(self.parts()))

    def process(
        self, vars: Optional[Mapping[str, Any]] = None, /, **kwargs: Any
    ) -> str:
        """Expand the template.

        Args:
            vars: Mapping of variable names to scalar or list values.
            **kwargs: Extra variables; these override entries in ``vars``.

        Returns:
            The expanded URI string.
        """
        merged: dict[str, Any] = dict(vars or {})
        merged.update(kwargs)
        return engine.process(self.parts(), merged)


def expand(
    template: str, vars: Optional[Mapping[str, Any]] = None, /, **kwargs: Any
) -> str:
    """Expand ``template`` in one call.

    Example::

        expand("https://api.github.com{/end}", {"end": "users"})
        expand("https://api.github.com{/end}", end="gists")
    """
    return Template(template).process(vars, **kwargs)
