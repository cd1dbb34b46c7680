"""Tests for docletrd.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from docletrd.config import ConfigError, DocletRdConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, DocletRdConfig)
    assert config.root == tmp_path.resolve()
    assert config.extension == ".Rd"
    assert config.encoding == "utf-8"
    assert config.link_extension == ".html"
    assert config.template_dir is None
    assert config.include_private is False


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".docletrd.yml"
    config_file.write_text(
        """
templates:
  rd:
    extension: "rd"
    encoding: "latin-1"
    link_extension: ".htm"
    template_dir: "doc/templates"
    private: yes
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.extension == ".rd"
    assert config.encoding == "latin-1"
    assert config.link_extension == ".htm"
    assert config.template_dir == tmp_path.resolve() / "doc" / "templates"
    assert config.include_private is True


def test_load_config_accepts_directory(tmp_path: Path) -> None:
    (tmp_path / ".docletrd.yml").write_text("templates:\n  rd:\n    extension: .man\n", encoding="utf-8")
    assert load_config(tmp_path).extension == ".man"


def test_load_config_ignores_other_template_sections(tmp_path: Path) -> None:
    (tmp_path / ".docletrd.yml").write_text("templates:\n  default:\n    layoutFile: x\n", encoding="utf-8")
    assert load_config(tmp_path) == DocletRdConfig(root=tmp_path.resolve())


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".docletrd.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).extension == ".Rd"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".docletrd.yml").write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path)


def test_load_config_reports_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".docletrd.yml").write_text("templates: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)
