"""Configuration loading for readmegen (.readmegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence

import yaml

from .fs import FileSystem, LocalFileSystem

CONFIG_FILENAME = ".readmegen.yml"

DEFAULT_OUTPUT = "README.md"
DEFAULT_SOURCE_DIR = "src"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ReadmeGenConfig:
    """Represents the settings defined in .readmegen.yml."""

    root: Path
    output: str = DEFAULT_OUTPUT
    source_dir: str = DEFAULT_SOURCE_DIR
    ignore_folders: List[str] = field(default_factory=list)

    @property
    def output_path(self) -> Path:
        return self.root / self.output

    @property
    def source_path(self) -> Path:
        return self.root / self.source_dir


def load_config(root: Path, fs: FileSystem | None = None) -> ReadmeGenConfig:
    """Load configuration for the project rooted at ``root``."""
    fs = fs or LocalFileSystem()
    config_file = root / CONFIG_FILENAME

    if not fs.exists(config_file):
        return ReadmeGenConfig(root=root)

    data = _read_config(fs, config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    output = _as_path_str(data.get("output")) or DEFAULT_OUTPUT
    source_dir = _as_path_str(data.get("source_dir")) or DEFAULT_SOURCE_DIR
    ignore_folders = _as_str_list(data.get("ignore_folders"))

    return ReadmeGenConfig(
        root=root,
        output=output,
        source_dir=source_dir,
        ignore_folders=ignore_folders,
    )


def _read_config(fs: FileSystem, path: Path) -> Any:
    try:
        text = fs.read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_path_str(value: Any) -> Optional[str]:
    text = _as_str(value)
    if text is None:
        return None
    cleaned = text.strip().replace("\\", "/").strip("/")
    return cleaned or None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "ReadmeGenConfig", "load_config"]
