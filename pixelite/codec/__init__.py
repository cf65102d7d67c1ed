"""Pixel transcoding between packed ARGB words and RGB/RGBA byte buffers."""

from __future__ import annotations

from .pixels import as_uint32_words, pack_pixels, resolve_bytes_per_pixel, unpack_pixels

__all__ = [
    "as_uint32_words",
    "pack_pixels",
    "resolve_bytes_per_pixel",
    "unpack_pixels",
]
