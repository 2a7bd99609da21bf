"""Angular project detection."""

from __future__ import annotations

from pathlib import Path

from ..fs import FileSystem
from ..models import ManifestRecord

ANGULAR_MARKER = "angular.json"
ANGULAR_SCOPE = "@angular/"


def detect_angular(fs: FileSystem, root: Path, manifest: ManifestRecord) -> bool:
    """Return True for an angular.json at the root or any ``@angular/`` dependency."""
    if fs.exists(root / ANGULAR_MARKER):
        return True
    names = list(manifest.dependencies) + list(manifest.dev_dependencies)
    return any(name.startswith(ANGULAR_SCOPE) for name in names)


__all__ = ["ANGULAR_MARKER", "ANGULAR_SCOPE", "detect_angular"]
