"""Pinned clock values for reproducible README output."""

from __future__ import annotations

from datetime import UTC, datetime

FIXED_NOW = datetime(2026, 10, 18, 12, 30, 45, 123000, tzinfo=UTC)


def fixed_clock() -> datetime:
    return FIXED_NOW


__all__ = ["FIXED_NOW", "fixed_clock"]
