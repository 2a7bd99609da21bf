"""Heuristics that inspect project sources for framework details."""

from __future__ import annotations

from .components import COMPONENT_SUFFIX, ComponentExtractor
from .framework import ANGULAR_MARKER, ANGULAR_SCOPE, detect_angular

__all__ = [
    "ANGULAR_MARKER",
    "ANGULAR_SCOPE",
    "COMPONENT_SUFFIX",
    "ComponentExtractor",
    "detect_angular",
]
