"""Configuration loading for refdoc (.refdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import RefDocError

CONFIG_FILENAME = ".refdoc.yml"


class ConfigError(RefDocError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class MembersConfig:
    """Where member descriptors come from."""

    source: Optional[Path] = None
    table: Optional[Path] = None


@dataclass
class ExamplesConfig:
    """Where example expressions and their evaluated results come from."""

    source: Optional[Path] = None
    start_line: Optional[int] = None
    marker: Optional[str] = None
    results: Optional[Path] = None
    pairs: Optional[Path] = None


@dataclass
class RenderingConfig:
    """Output formatting knobs."""

    code_language: str = "code"
    templates_dir: Optional[Path] = None
    contributing: Optional[str] = None


@dataclass
class RefDocConfig:
    """Represents the settings defined in .refdoc.yml."""

    root: Path
    class_name: Optional[str] = None
    readme: Path = Path("README.md")
    package: Path = Path("composer.json")
    output: Path = Path("REFERENCE.md")
    members: MembersConfig = field(default_factory=MembersConfig)
    examples: ExamplesConfig = field(default_factory=ExamplesConfig)
    rendering: RenderingConfig = field(default_factory=RenderingConfig)

    def resolve(self, path: Path) -> Path:
        """Resolve ``path`` against the configuration root."""
        return path if path.is_absolute() else self.root / path


def load_config(config_path: Path) -> RefDocConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return RefDocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = RefDocConfig(root=root, class_name=_as_str(data.get("class")))
    for key in ("readme", "package", "output"):
        value = _as_str(data.get(key))
        if value:
            setattr(config, key, Path(value))

    members_data = _as_dict(data.get("members"), "members")
    config.members = MembersConfig(
        source=_as_path(members_data.get("source")),
        table=_as_path(members_data.get("table")),
    )
    if config.members.source and config.members.table:
        raise ConfigError("members.source and members.table are mutually exclusive")

    examples_data = _as_dict(data.get("examples"), "examples")
    config.examples = ExamplesConfig(
        source=_as_path(examples_data.get("source")),
        start_line=_as_int(examples_data.get("start_line")),
        marker=_as_str(examples_data.get("marker")),
        results=_as_path(examples_data.get("results")),
        pairs=_as_path(examples_data.get("pairs")),
    )

    rendering_data = _as_dict(data.get("rendering"), "rendering")
    rendering = RenderingConfig()
    language = _as_str(rendering_data.get("code_language"))
    if language is not None:
        rendering.code_language = language
    rendering.templates_dir = _as_path(rendering_data.get("templates_dir"))
    rendering.contributing = _as_str(rendering_data.get("contributing"))
    config.rendering = rendering

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any, key: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a mapping")
    return value


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_path(value: Any) -> Optional[Path]:
    text = _as_str(value)
    return Path(text) if text else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ConfigError(f"Expected an integer, got {value!r}") from exc
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ExamplesConfig",
    "MembersConfig",
    "RefDocConfig",
    "RenderingConfig",
    "load_config",
]
