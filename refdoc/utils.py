"""Shared file-reading and text helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Type

import yaml

from .errors import RefDocError


def load_structured(path: Path, *, error: Type[RefDocError] = RefDocError) -> Any:
    """Read a JSON or YAML file, chosen by extension (YAML for anything not ``.json``)."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise error(f"Failed to parse {path.name}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise error(f"Failed to parse {path.name}: {exc}") from exc


def split_lines(text: str) -> List[str]:
    """Split on newlines only, so form feeds and Unicode separators stay inside a line.

    A trailing newline does not produce an extra empty line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


__all__ = ["load_structured", "split_lines"]
