"""Jinja2 template loading for Rd output."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Mapping, Sequence

from jinja2 import Environment, FileSystemLoader

from .helpers import needs_signature

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")
DEFAULT_TEMPLATE = "rd.tmpl"

_RD_SPECIAL = re.compile(r"([\\%{}])")


def rd_escape(value: Any) -> str:
    """Escape characters that Rd treats as markup (backslash, percent, braces)."""
    if value is None:
        return ""
    return _RD_SPECIAL.sub(r"\\\1", str(value))


def type_names(value: Any) -> str:
    """Join a parameter's declared type names with ``|``."""
    names: Sequence[str] = getattr(value, "type_names", None) or []
    return "|".join(names)


class TemplateRenderer:
    """Renders named templates from a user template directory and the bundled set."""

    def __init__(self, template_dir: Path | None = None) -> None:
        self.template_dir = template_dir
        self._env = self._create_env(template_dir)

    @property
    def environment(self) -> Environment:
        return self._env

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        """Render ``name`` with ``context``; missing templates raise TemplateNotFound."""
        template = self._env.get_template(name)
        return template.render(**context)

    @staticmethod
    def _create_env(template_dir: Path | None) -> Environment:
        directories = []
        if template_dir:
            directories.append(str(template_dir))
        directories.append(str(DEFAULT_TEMPLATES_DIR))
        # keep lookup order, drop duplicates
        seen: set[str] = set()
        ordered: list[str] = []
        for directory in directories:
            if directory not in seen:
                ordered.append(directory)
                seen.add(directory)
        env = Environment(
            loader=FileSystemLoader(ordered),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["rd_escape"] = rd_escape
        env.filters["type_names"] = type_names
        env.globals["needs_signature"] = needs_signature
        return env


__all__ = ["DEFAULT_TEMPLATE", "DEFAULT_TEMPLATES_DIR", "TemplateRenderer", "rd_escape", "type_names"]
