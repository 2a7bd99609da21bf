"""Filesystem access used by the README pipeline."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class FileSystem(ABC):
    """Capability interface for the handful of filesystem calls readmegen makes."""

    @abstractmethod
    def list_directory(self, path: Path) -> List[str]:
        """Return entry names in ``path``; raise FileNotFoundError when it is missing."""

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Return decoded UTF-8 contents of ``path``."""

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Replace the contents of ``path`` with ``content``."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return True when ``path`` names a file or directory."""

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Return True when ``path`` names a directory."""


class LocalFileSystem(FileSystem):
    """FileSystem backed by the host disk."""

    def list_directory(self, path: Path) -> List[str]:
        return [entry.name for entry in path.iterdir()]

    def read_text(self, path: Path) -> str:
        with path.open(encoding="utf-8", newline="") as handle:
            return handle.read()

    def write_text(self, path: Path, content: str) -> None:
        # newline="" on both sides keeps line endings byte-exact for change detection.
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()


__all__ = ["FileSystem", "LocalFileSystem"]
