"""Configuration parsing for qwuri.yaml"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, model_validator

from qwuri.exceptions import TemplateNotFoundError
from qwuri.template import Template

CONFIG_FILENAME = "qwuri.yaml"


class TemplateConfig(BaseModel):
    """A named template and its default variables"""

    template: str
    vars: dict[str, Any] = {}
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_shorthand(cls, data: Any) -> Any:
        # `name: "{/path}"` is shorthand for `name: {template: "{/path}"}`
        if isinstance(data, str):
            return {"template": data}
        return data


class QwuriConfig(BaseModel):
    """Full qwuri.yaml configuration"""

    name: str | None = None
    vars: dict[str, Any] = {}
    templates: dict[str, TemplateConfig] = {}

    @classmethod
    def load(cls, path: Path) -> "QwuriConfig":
        """Load config from yaml file"""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)

    def get_template(self, name: str) -> Template:
        """Build a Template for a configured name"""
        entry = self.templates.get(name)
        if entry is None:
            raise TemplateNotFoundError(name)
        return Template(entry.template)

    def resolve_vars(
        self, name: str, overrides: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Merge global vars, template vars, then overrides (last wins)"""
        entry = self.templates.get(name)
        if entry is None:
            raise TemplateNotFoundError(name)

        resolved = dict(self.vars)
        resolved.update(entry.vars)
        resolved.update(overrides or {})
        return resolved


def find_config_file(start: Path | None = None) -> Path | None:
    """Find qwuri.yaml in the given directory or its parents."""
    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None
