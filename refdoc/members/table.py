"""Hand-authored member descriptor tables (YAML or JSON)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

from ..config import ConfigError
from ..utils import load_structured
from ..models import MemberDescriptor, ParameterDescriptor


def load_descriptor_table(path: Path) -> List[MemberDescriptor]:
    """Load member descriptors from ``path``, keeping the listed order."""
    data = load_structured(path, error=ConfigError)
    if isinstance(data, dict):
        data = data.get("members")
    if data is None:
        return []
    if not isinstance(data, list):
        raise ConfigError(f"{path.name} must contain a list of members")
    return [_member_from(entry, index, path) for index, entry in enumerate(data, start=1)]


def _member_from(entry: Any, index: int, path: Path) -> MemberDescriptor:
    if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
        raise ConfigError(f"Member #{index} in {path.name} needs a 'name'")
    raw_parameters = entry.get("parameters") or []
    if not isinstance(raw_parameters, list):
        raise ConfigError(f"Member '{entry['name']}' parameters must be a list")
    parameters = []
    for parameter in raw_parameters:
        if isinstance(parameter, str):
            parameters.append(ParameterDescriptor(name=parameter.lstrip("$")))
            continue
        if not isinstance(parameter, dict) or not isinstance(parameter.get("name"), str):
            raise ConfigError(f"Member '{entry['name']}' has a parameter without a name")
        parameters.append(
            ParameterDescriptor(
                name=parameter["name"].lstrip("$"),
                type=_as_str(parameter.get("type")),
                optional=bool(parameter.get("optional", False)),
            )
        )
    return MemberDescriptor(
        name=entry["name"],
        parameters=tuple(parameters),
        return_type=_as_str(entry.get("return_type")),
        doc_comment=_as_str(entry.get("doc")),
        visibility=_as_str(entry.get("visibility")) or "public",
        static=bool(entry.get("static", False)),
    )


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) else None


__all__ = ["load_descriptor_table"]
