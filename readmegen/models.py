"""Core data models shared across readmegen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple


@dataclass
class ManifestRecord:
    """Normalized view of package.json; every field defaults to empty."""

    name: str = ""
    description: str = ""
    node_version: str = ""
    scripts: Dict[str, str] = field(default_factory=dict)
    dependencies: Dict[str, str] = field(default_factory=dict)
    dev_dependencies: Dict[str, str] = field(default_factory=dict)


@dataclass
class ComponentInfo:
    """Selector and class name declared in a component source file."""

    file: str
    selector: str = ""
    class_name: str = ""


@dataclass
class ProjectFacts:
    """Everything the report builder needs, gathered in a single pass."""

    title: str
    description: str = ""
    node_version: str = ""
    scripts: List[Tuple[str, str]] = field(default_factory=list)
    dependencies: List[Tuple[str, str]] = field(default_factory=list)
    dev_dependencies: List[Tuple[str, str]] = field(default_factory=list)
    is_angular: bool = False
    components: List[ComponentInfo] = field(default_factory=list)
    top_level_folders: List[str] = field(default_factory=list)
    source_files: List[str] = field(default_factory=list)
    source_dir: str = "src"


@dataclass
class WriteOutcome:
    """Result of comparing and (optionally) writing the README."""

    path: Path
    status: str
    diff: str = ""
    dry_run: bool = False

    @property
    def updated(self) -> bool:
        return self.status == "updated"
