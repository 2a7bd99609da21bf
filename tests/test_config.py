"""Tests for readmegen.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from readmegen.config import ConfigError, ReadmeGenConfig, load_config
from tests._fixtures.memory_fs import MemoryFileSystem


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ReadmeGenConfig)
    assert config.root == tmp_path
    assert config.output == "README.md"
    assert config.source_dir == "src"
    assert config.ignore_folders == []
    assert config.output_path == tmp_path / "README.md"
    assert config.source_path == tmp_path / "src"


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / ".readmegen.yml").write_text(
        """
output: docs/OVERVIEW.md
source_dir: "app/"
ignore_folders:
  - dist
  - coverage
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.output == "docs/OVERVIEW.md"
    assert config.source_dir == "app"
    assert config.ignore_folders == ["dist", "coverage"]
    assert config.output_path == tmp_path / "docs" / "OVERVIEW.md"


def test_load_config_accepts_scalar_ignore_folder(tmp_path: Path) -> None:
    (tmp_path / ".readmegen.yml").write_text("ignore_folders: dist\n", encoding="utf-8")

    assert load_config(tmp_path).ignore_folders == ["dist"]


def test_load_config_treats_empty_file_as_defaults(tmp_path: Path) -> None:
    (tmp_path / ".readmegen.yml").write_text("\n# nothing here\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.output == "README.md"
    assert config.source_dir == "src"


def test_load_config_ignores_wrongly_typed_values(tmp_path: Path) -> None:
    (tmp_path / ".readmegen.yml").write_text(
        "output: [a, b]\nsource_dir: true\nignore_folders: {dist: 1}\n",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.output == "README.md"
    assert config.source_dir == "src"
    assert config.ignore_folders == []


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".readmegen.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_wraps_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".readmegen.yml").write_text("output: [unterminated\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse .readmegen.yml"):
        load_config(tmp_path)


def test_load_config_reads_through_injected_filesystem() -> None:
    fs = MemoryFileSystem({"/repo/.readmegen.yml": "source_dir: lib\n"})

    config = load_config(Path("/repo"), fs)

    assert config.source_path == Path("/repo/lib")
