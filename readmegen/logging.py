"""Logging utilities for the readmegen CLI."""

from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "readmegen"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the readmegen hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Send readmegen diagnostics to stderr.

    Only warnings are shown by default so stdout carries nothing but the
    single status line; ``verbose`` adds the per-stage debug trace.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated CLI invocations do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[readmegen] %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
