"""Regex-based extraction of Angular component metadata."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List

from ..fs import FileSystem
from ..logging import get_logger
from ..models import ComponentInfo

COMPONENT_SUFFIX = ".component.ts"

_SELECTOR = re.compile(r"selector\s*:\s*['\"`]([^'\"`]+)['\"`]")
_EXPORTED_CLASS = re.compile(r"export\s+class\s+(\w+)")


class ComponentExtractor:
    """Pulls the selector and exported class name out of ``*.component.ts`` files."""

    def __init__(self, fs: FileSystem, suffix: str = COMPONENT_SUFFIX) -> None:
        self.fs = fs
        self.suffix = suffix
        self.logger = get_logger("components")

    def extract(self, source_root: Path, files: Iterable[str]) -> List[ComponentInfo]:
        """Return one ComponentInfo per readable component file, sorted by path.

        ``files`` are paths relative to ``source_root``. Unreadable files are skipped.
        """
        components: List[ComponentInfo] = []
        for rel_path in files:
            if not rel_path.endswith(self.suffix):
                continue
            try:
                text = self.fs.read_text(source_root / rel_path)
            except (OSError, UnicodeDecodeError) as exc:
                self.logger.debug("Skipping component %s: %s", rel_path, exc)
                continue
            components.append(self.parse(rel_path, text))
        return sorted(
            components, key=lambda component: (component.file.casefold(), component.file)
        )

    @staticmethod
    def parse(rel_path: str, text: str) -> ComponentInfo:
        selector = _SELECTOR.search(text)
        class_match = _EXPORTED_CLASS.search(text)
        return ComponentInfo(
            file=rel_path,
            selector=selector.group(1) if selector else "",
            class_name=class_match.group(1) if class_match else "",
        )


__all__ = ["COMPONENT_SUFFIX", "ComponentExtractor"]
