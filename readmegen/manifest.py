"""package.json loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from .fs import FileSystem
from .logging import get_logger
from .models import ManifestRecord

MANIFEST_FILENAME = "package.json"

logger = get_logger("manifest")


def load_package_json(fs: FileSystem, path: Path) -> Dict[str, object]:
    """Return the parsed package.json contents or an empty dict."""
    if not fs.exists(path):
        logger.debug("No manifest found at %s", path)
        return {}
    try:
        data = json.loads(fs.read_text(path))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.debug("Ignoring unreadable manifest %s: %s", path, exc)
        return {}
    if isinstance(data, dict):
        return data
    logger.debug("Ignoring manifest %s: root is not an object", path)
    return {}


def read_manifest(fs: FileSystem, path: Path) -> ManifestRecord:
    """Read ``path`` into a ManifestRecord, yielding an empty record on any failure."""
    data = load_package_json(fs, path)
    engines = data.get("engines")
    node_version = _as_str(engines.get("node")) if isinstance(engines, dict) else ""

    return ManifestRecord(
        name=_as_str(data.get("name")),
        description=_as_str(data.get("description")),
        node_version=node_version,
        scripts=_as_str_mapping(data.get("scripts")),
        dependencies=_as_str_mapping(data.get("dependencies")),
        dev_dependencies=_as_str_mapping(data.get("devDependencies")),
    )


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_str_mapping(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {
        str(key): item if isinstance(item, str) else json.dumps(item)
        for key, item in value.items()
    }


__all__ = ["MANIFEST_FILENAME", "load_package_json", "read_manifest"]
