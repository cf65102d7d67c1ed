"""Utility helpers for pixelite."""

from __future__ import annotations

from .buffer import as_byte_view, byte_length
from .optional_deps import LazyModule, optional_import, require

__all__ = [
    "LazyModule",
    "as_byte_view",
    "byte_length",
    "optional_import",
    "require",
]
