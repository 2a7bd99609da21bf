"""Pipeline orchestration for README generation."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Tuple

from .analyzers import ComponentExtractor, detect_angular
from .config import ConfigError, ReadmeGenConfig, load_config
from .fs import FileSystem, LocalFileSystem
from .logging import get_logger
from .manifest import MANIFEST_FILENAME, read_manifest
from .models import ProjectFacts, WriteOutcome
from .report import ReportBuilder
from .scanner import IGNORED_TOP_LEVEL, list_files, list_top_level_folders
from .writer import ReadmeWriter


class Orchestrator:
    """Coordinates manifest reading, scanning, rendering and writing."""

    def __init__(
        self,
        fs: FileSystem | None = None,
        clock: Callable[[], datetime] | None = None,
        report_builder: ReportBuilder | None = None,
        component_extractor: ComponentExtractor | None = None,
        writer: ReadmeWriter | None = None,
    ) -> None:
        self.fs = fs or LocalFileSystem()
        self.report_builder = report_builder or ReportBuilder(clock=clock)
        self.component_extractor = component_extractor or ComponentExtractor(self.fs)
        self.writer = writer or ReadmeWriter(self.fs)
        self.logger = get_logger("orchestrator")

    def run(self, path: str | Path = ".", *, dry_run: bool = False) -> WriteOutcome:
        """Regenerate the README for the project at ``path``."""
        root = Path(path).expanduser().resolve()
        self.logger.debug("Generating README for %s", root)
        config = self._load_config(root)
        content = self.render(root, config)
        return self.writer.write(config.output_path, content, dry_run=dry_run)

    def render(self, root: Path, config: ReadmeGenConfig | None = None) -> str:
        """Return the README markdown for ``root`` without touching the output file."""
        config = config or self._load_config(root)
        facts = self.collect(root, config)
        return self.report_builder.build(facts)

    def collect(self, root: Path, config: ReadmeGenConfig) -> ProjectFacts:
        manifest = read_manifest(self.fs, root / MANIFEST_FILENAME)
        source_root = config.source_path

        source_files = sorted(list_files(self.fs, source_root))
        self.logger.debug("Found %d files under %s", len(source_files), config.source_dir)

        ignore = set(IGNORED_TOP_LEVEL)
        ignore.update(config.ignore_folders)
        folders = list_top_level_folders(self.fs, root, ignore)

        is_angular = detect_angular(self.fs, root, manifest)
        components = (
            self.component_extractor.extract(source_root, source_files) if is_angular else []
        )
        self.logger.debug(
            "Angular detected: %s (%d components)", is_angular, len(components)
        )

        return ProjectFacts(
            title=manifest.name or root.name,
            description=manifest.description,
            node_version=manifest.node_version,
            scripts=sorted(manifest.scripts.items(), key=_by_name),
            dependencies=sorted(manifest.dependencies.items(), key=_by_name),
            dev_dependencies=sorted(manifest.dev_dependencies.items(), key=_by_name),
            is_angular=is_angular,
            components=components,
            top_level_folders=folders,
            source_files=source_files,
            source_dir=config.source_dir,
        )

    def _load_config(self, root: Path) -> ReadmeGenConfig:
        try:
            return load_config(root, self.fs)
        except ConfigError as exc:
            self.logger.warning("Ignoring invalid configuration: %s", exc)
            return ReadmeGenConfig(root=root)


def _by_name(pair: Tuple[str, str]) -> Tuple[str, str]:
    # Alphabetical regardless of case; exact ties fall back to code-point order.
    return (pair[0].casefold(), pair[0])


__all__ = ["Orchestrator"]
