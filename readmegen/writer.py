"""Change-detecting README writer."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Optional

from .fs import FileSystem
from .logging import get_logger
from .models import WriteOutcome

UPDATED = "updated"
UNCHANGED = "unchanged"


class ReadmeWriter:
    """Writes the README only when its content changed."""

    def __init__(self, fs: FileSystem) -> None:
        self.fs = fs
        self.logger = get_logger("writer")

    def read_previous(self, path: Path) -> Optional[str]:
        """Return the current README text, or None when the file does not exist."""
        if not self.fs.exists(path):
            return None
        try:
            return self.fs.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.warning("Treating unreadable %s as absent: %s", path.name, exc)
            return None

    def write(self, path: Path, content: str, *, dry_run: bool = False) -> WriteOutcome:
        previous = self.read_previous(path)
        if previous == content:
            self.logger.debug("%s already matches generated content", path.name)
            return WriteOutcome(path=path, status=UNCHANGED, dry_run=dry_run)

        diff_text = self._render_diff(path.name, previous, content)
        if dry_run:
            self.logger.debug("Dry-run completed; %s not written", path.name)
        else:
            self.fs.write_text(path, content)
            self.logger.debug("Wrote %d characters to %s", len(content), path)
        return WriteOutcome(
            path=path,
            status=UPDATED,
            diff=diff_text,
            dry_run=dry_run,
        )

    @staticmethod
    def _render_diff(name: str, original: Optional[str], updated: str) -> str:
        diff = difflib.unified_diff(
            (original or "").splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{name} (original)",
            tofile=f"{name} (updated)",
        )
        return "".join(diff)


__all__ = ["ReadmeWriter", "UNCHANGED", "UPDATED"]
