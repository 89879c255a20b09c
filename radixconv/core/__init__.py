"""Core utilities: alphabet, types, validation."""

from __future__ import annotations

__all__ = [
    "alphabet",
    "types",
    "validation",
]
