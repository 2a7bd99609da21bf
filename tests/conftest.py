from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.clock import fixed_clock as _fixed_clock
from tests._fixtures.memory_fs import MemoryFileSystem
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def fixed_clock():
    """Clock pinned to FIXED_NOW so rendered READMEs are reproducible."""
    return _fixed_clock
