"""Configuration loading for docletrd (.docletrd.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".docletrd.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class DocletRdConfig:
    """Represents the settings defined under ``templates.rd`` in .docletrd.yml."""

    root: Path
    extension: str = ".Rd"
    encoding: str = "utf-8"
    link_extension: str = ".html"
    template_dir: Optional[Path] = None
    include_private: bool = False


def load_config(config_path: Path) -> DocletRdConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocletRdConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    templates_data = _as_dict(data.get("templates"))
    rd_data = _as_dict(templates_data.get("rd"))
    config = DocletRdConfig(root=root)
    if not rd_data:
        return config

    extension = _as_str(rd_data.get("extension"))
    if extension:
        config.extension = extension if extension.startswith(".") else f".{extension}"

    encoding = _as_str(rd_data.get("encoding"))
    if encoding:
        config.encoding = encoding

    link_extension = _as_str(rd_data.get("link_extension"))
    if link_extension is not None:
        config.link_extension = link_extension

    template_dir = _as_str(rd_data.get("template_dir"))
    if template_dir:
        config.template_dir = root / template_dir

    private = _as_bool(rd_data.get("private"))
    if private is not None:
        config.include_private = private

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


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "DocletRdConfig", "load_config"]
