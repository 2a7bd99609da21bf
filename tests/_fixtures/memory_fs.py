"""In-memory FileSystem double for pipeline tests."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Set

from readmegen.fs import FileSystem


class MemoryFileSystem(FileSystem):
    """Stores files as ``posix path -> text``; directories are implied by file paths."""

    def __init__(self, files: Mapping[str, str] | None = None) -> None:
        self.files: Dict[str, str] = {}
        self.dirs: Set[str] = set()
        self.unreadable: Set[str] = set()
        self.writes: List[str] = []
        for path, content in (files or {}).items():
            self.add_file(path, content)

    def add_file(self, path: str, content: str) -> None:
        key = Path(path).as_posix()
        self.files[key] = content
        self.add_dir(Path(key).parent.as_posix())

    def add_dir(self, path: str) -> None:
        current = Path(path)
        while current.as_posix() not in (".", "/"):
            self.dirs.add(current.as_posix())
            current = current.parent
        self.dirs.add(current.as_posix())

    def list_directory(self, path: Path) -> List[str]:
        key = path.as_posix()
        if key not in self.dirs:
            raise FileNotFoundError(key)
        prefix = key.rstrip("/") + "/"
        names: List[str] = []
        for entry in sorted(self.files) + sorted(self.dirs):
            if not entry.startswith(prefix):
                continue
            name = entry[len(prefix):].split("/", 1)[0]
            if name and name not in names:
                names.append(name)
        return names

    def read_text(self, path: Path) -> str:
        key = path.as_posix()
        if key in self.unreadable:
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        try:
            return self.files[key]
        except KeyError:
            raise FileNotFoundError(key) from None

    def write_text(self, path: Path, content: str) -> None:
        self.add_file(path.as_posix(), content)
        self.writes.append(path.as_posix())

    def exists(self, path: Path) -> bool:
        key = path.as_posix()
        return key in self.files or key in self.dirs

    def is_dir(self, path: Path) -> bool:
        return path.as_posix() in self.dirs


__all__ = ["MemoryFileSystem"]
