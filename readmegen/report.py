"""Markdown rendering of gathered project facts."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Callable, List, Optional, Sequence, Tuple

from .models import ComponentInfo, ProjectFacts

BUILD_SCRIPTS: tuple[str, ...] = ("build", "prod", "prepare")
START_SCRIPTS: tuple[str, ...] = ("start", "serve")

SHELL_NOTE = "These commands use PowerShell; adjust for bash if needed."
FENCE_LANGUAGE = "powershell"

ANGULAR_SERVE_COMMAND = "npx ng serve --open"
ANGULAR_BUILD_COMMAND = "npx ng build --prod"
GENERIC_BUILD_COMMAND = "npm run build"


def format_timestamp(moment: datetime) -> str:
    """Return ``moment`` as UTC ISO-8601 with milliseconds, e.g. ``2026-10-18T12:00:00.000Z``."""
    moment = moment.astimezone(UTC)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def select_build_command(scripts: Sequence[Tuple[str, str]], is_angular: bool) -> str:
    script = _first_script(scripts, BUILD_SCRIPTS)
    if script is not None:
        return f"npm run {script}"
    if is_angular:
        return ANGULAR_BUILD_COMMAND
    return GENERIC_BUILD_COMMAND


def select_start_command(scripts: Sequence[Tuple[str, str]]) -> Optional[str]:
    script = _first_script(scripts, START_SCRIPTS)
    return f"npm run {script}" if script is not None else None


def select_test_command(scripts: Sequence[Tuple[str, str]]) -> str:
    if _first_script(scripts, ("test",)) is not None:
        return "npm test"
    return "npm run test"


def _first_script(scripts: Sequence[Tuple[str, str]], names: Sequence[str]) -> Optional[str]:
    for name, _ in scripts:
        if name in names:
            return name
    return None


class ReportBuilder:
    """Assembles the README from ProjectFacts in a fixed section order."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(UTC))

    def build(self, facts: ProjectFacts) -> str:
        blocks: List[str] = []
        blocks.extend(self._header(facts))
        blocks.extend(self._getting_started(facts))
        blocks.extend(self._scripts(facts))
        blocks.extend(
            self._pairs(
                "Dependencies",
                facts.dependencies,
                "_No dependencies listed._",
            )
        )
        blocks.extend(
            self._pairs(
                "Dev dependencies",
                facts.dev_dependencies,
                "_No devDependencies listed._",
            )
        )
        blocks.extend(self._folders(facts))
        blocks.extend(self._components(facts))
        blocks.extend(self._files(facts))
        return "\n\n".join(blocks) + "\n"

    def _header(self, facts: ProjectFacts) -> List[str]:
        blocks = [f"# {facts.title}"]
        if facts.description:
            blocks.append(facts.description)
        blocks.append(f"Generated: {format_timestamp(self._clock())}")
        if facts.node_version:
            blocks.append(f"Node requirement: {facts.node_version}")
        return blocks

    def _getting_started(self, facts: ProjectFacts) -> List[str]:
        blocks = ["## Getting started", SHELL_NOTE]
        blocks.extend(self._snippet("Install dependencies:", "npm ci"))
        if facts.is_angular:
            blocks.extend(self._snippet("Run the dev server (Angular):", ANGULAR_SERVE_COMMAND))
        start = select_start_command(facts.scripts)
        if start is not None:
            blocks.extend(self._snippet("Start the app using npm script:", start))
        blocks.extend(
            self._snippet(
                "Build for production:",
                select_build_command(facts.scripts, facts.is_angular),
            )
        )
        blocks.extend(self._snippet("Run tests:", select_test_command(facts.scripts)))
        return blocks

    @staticmethod
    def _snippet(caption: str, command: str) -> List[str]:
        return [caption, f"```{FENCE_LANGUAGE}\n{command}\n```"]

    @staticmethod
    def _scripts(facts: ProjectFacts) -> List[str]:
        if not facts.scripts:
            return ["## Available npm scripts", "_No scripts defined in `package.json`._"]
        lines = [
            "- **{name}**: `{command}`".format(name=name, command=command.replace("`", "\\`"))
            for name, command in facts.scripts
        ]
        return ["## Available npm scripts", "\n".join(lines)]

    @staticmethod
    def _pairs(title: str, pairs: Sequence[Tuple[str, str]], empty: str) -> List[str]:
        if not pairs:
            return [f"## {title}", empty]
        return [f"## {title}", "\n".join(f"- `{name}`: {version}" for name, version in pairs)]

    @staticmethod
    def _folders(facts: ProjectFacts) -> List[str]:
        title = "## Project structure (top-level folders)"
        if not facts.top_level_folders:
            return [title, "_No top-level folders found or repository is empty._"]
        return [title, "\n".join(f"- `{folder}`" for folder in facts.top_level_folders)]

    def _components(self, facts: ProjectFacts) -> List[str]:
        title = "## Angular components (detected)"
        if not facts.is_angular:
            return [title, "_Angular project not detected._"]
        if not facts.components:
            return [
                title,
                f"_No `*.component.ts` files detected under `{facts.source_dir}/`._",
            ]
        return [title, "\n".join(self._component_line(component) for component in facts.components)]

    @staticmethod
    def _component_line(component: ComponentInfo) -> str:
        selector = component.selector or "-"
        class_name = component.class_name or "-"
        return f"- `{component.file}` — selector: `{selector}`, class: `{class_name}`"

    @staticmethod
    def _files(facts: ProjectFacts) -> List[str]:
        title = f"## Files in {facts.source_dir}/"
        if not facts.source_files:
            return [title, f"_No files found in `{facts.source_dir}/`_"]
        return [title, "\n".join(f"- `{path}`" for path in facts.source_files)]


__all__ = [
    "ReportBuilder",
    "format_timestamp",
    "select_build_command",
    "select_start_command",
    "select_test_command",
]
