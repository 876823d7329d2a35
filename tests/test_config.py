"""Tests for refdoc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from refdoc.config import ConfigError, RefDocConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, RefDocConfig)
    assert config.root == tmp_path.resolve()
    assert config.class_name is None
    assert config.readme == Path("README.md")
    assert config.package == Path("composer.json")
    assert config.output == Path("REFERENCE.md")
    assert config.members.source is None
    assert config.members.table is None
    assert config.examples.results is None
    assert config.rendering.code_language == "code"
    assert config.rendering.templates_dir is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".refdoc.yml"
    config_file.write_text(
        """
class: Number
readme: .github/docs/README.md
package: composer.json
output: README.md
members:
  source: src/Number.php
examples:
  source: .github/docs/examples.php
  marker: "examples(["
  results: build/results.json
rendering:
  code_language: php
  templates_dir: docs/templates
  contributing: "Open a PR."
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.class_name == "Number"
    assert config.readme == Path(".github/docs/README.md")
    assert config.output == Path("README.md")
    assert config.members.source == Path("src/Number.php")
    assert config.examples.source == Path(".github/docs/examples.php")
    assert config.examples.marker == "examples(["
    assert config.examples.start_line is None
    assert config.examples.results == Path("build/results.json")
    assert config.rendering.code_language == "php"
    assert config.rendering.templates_dir == Path("docs/templates")
    assert config.rendering.contributing == "Open a PR."
    assert config.resolve(config.readme) == tmp_path.resolve() / ".github/docs/README.md"


def test_load_config_reads_start_line(tmp_path: Path) -> None:
    (tmp_path / ".refdoc.yml").write_text(
        "class: Number\nexamples:\n  start_line: '12'\n", encoding="utf-8"
    )
    assert load_config(tmp_path).examples.start_line == 12


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".refdoc.yml").write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".refdoc.yml").write_text("class: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_both_member_sources(tmp_path: Path) -> None:
    (tmp_path / ".refdoc.yml").write_text(
        "members:\n  source: a.php\n  table: b.yml\n", encoding="utf-8"
    )
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".refdoc.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).class_name is None
