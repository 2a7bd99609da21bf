"""CLI entrypoint for readmegen."""

from __future__ import annotations

import argparse
import sys

from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description="Generate a README.md from package.json and the project source tree.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview README changes without writing.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readmegen."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    orchestrator = Orchestrator()
    try:
        outcome = orchestrator.run(args.path, dry_run=bool(args.dry_run))
    except OSError as exc:
        parser.exit(1, f"readmegen failed: {exc}\nRun with --verbose for more details.\n")

    message = f"{outcome.path.name} {outcome.status}"
    if outcome.dry_run:
        message += " (dry-run)"
    print(message)
    if outcome.dry_run and outcome.diff:
        print(outcome.diff, end="")


if __name__ == "__main__":
    main(sys.argv[1:])
