"""Jinja2 rendering of the top-level reference layout."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List

from jinja2 import Environment, FileSystemLoader

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")
REFERENCE_TEMPLATE = "reference.md.j2"


class TemplateRenderer:
    """Renders the reference document, preferring user templates over the bundled one."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def render(self, **context: Any) -> str:
        template = self._env.get_template(REFERENCE_TEMPLATE)
        return template.render(**context).rstrip("\n") + "\n"

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(DEFAULT_TEMPLATES_DIR))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = ["DEFAULT_TEMPLATES_DIR", "REFERENCE_TEMPLATE", "TemplateRenderer"]
