"""Read the package identity used by the installation section."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import MetadataError
from .models import PackageMetadata

INSTALL_COMMANDS: Dict[str, str] = {
    "composer": "composer require {name}",
    "npm": "npm install {name}",
    "pip": "pip install {name}",
}

_KIND_BY_FILENAME = {
    "composer.json": "composer",
    "package.json": "npm",
    "pyproject.toml": "pip",
}


def load_package_metadata(path: Path) -> PackageMetadata:
    """Load ``composer.json``, ``package.json`` or ``pyproject.toml`` metadata."""
    kind = _KIND_BY_FILENAME.get(path.name)
    if kind is None:
        kind = "pip" if path.suffix == ".toml" else "composer"
    text = path.read_text(encoding="utf-8")
    return parse_package_metadata(text, kind, source=path.name)


def parse_package_metadata(text: str, kind: str, *, source: str = "metadata") -> PackageMetadata:
    if kind not in INSTALL_COMMANDS:
        raise MetadataError(f"Unsupported package kind: {kind}")
    name = _toml_name(text, source) if kind == "pip" else _json_name(text, source)
    if not name:
        raise MetadataError(f"{source} does not declare a package name")
    return PackageMetadata(
        name=name,
        kind=kind,
        install_command=INSTALL_COMMANDS[kind].format(name=name),
    )


def _json_name(text: str, source: str) -> Optional[str]:
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MetadataError(f"Failed to parse {source}: {exc}") from exc
    if not isinstance(data, dict):
        return None
    name = data.get("name")
    return name.strip() if isinstance(name, str) else None


def _toml_name(text: str, source: str) -> Optional[str]:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise MetadataError(f"Failed to parse {source}: {exc}") from exc
    project = data.get("project")
    if isinstance(project, dict) and isinstance(project.get("name"), str):
        return project["name"].strip()
    poetry = data.get("tool", {}).get("poetry", {})
    if isinstance(poetry, dict) and isinstance(poetry.get("name"), str):
        return poetry["name"].strip()
    return None


__all__ = ["INSTALL_COMMANDS", "load_package_metadata", "parse_package_metadata"]
