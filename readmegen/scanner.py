"""Source tree and project root listing."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .fs import FileSystem

IGNORED_TOP_LEVEL = frozenset(
    {
        "node_modules",
        ".git",
        ".github",
        "README.md",
        "package.json",
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
    }
)


def list_files(fs: FileSystem, directory: Path, base: str = "") -> List[str]:
    """Return every file under ``directory`` as a ``/``-joined path relative to it.

    Entries come back in directory-listing order; callers sort. A missing
    directory yields an empty list.
    """
    if not fs.is_dir(directory):
        return []

    files: List[str] = []
    for name in fs.list_directory(directory):
        full = directory / name
        rel_path = f"{base}/{name}" if base else name
        if fs.is_dir(full):
            files.extend(list_files(fs, full, rel_path))
        else:
            files.append(rel_path)
    return files


def list_top_level_folders(
    fs: FileSystem, root: Path, ignore: Iterable[str] = IGNORED_TOP_LEVEL
) -> List[str]:
    """Return the sorted immediate subdirectories of ``root`` minus ``ignore``."""
    if not fs.is_dir(root):
        return []
    ignored = set(ignore)
    return sorted(
        name
        for name in fs.list_directory(root)
        if name not in ignored and fs.is_dir(root / name)
    )


__all__ = ["IGNORED_TOP_LEVEL", "list_files", "list_top_level_folders"]
