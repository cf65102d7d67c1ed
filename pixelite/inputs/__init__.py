"""Input shape checks and bitmap normalization.

Sources are validated against the active environment before any decoding,
and decoded bitmaps are converted to a single canonical numpy representation:

- RGBA
- uint8
- HWC
"""

from __future__ import annotations

from .bitmap import is_bitmap, is_pil_image, normalize_bitmap
from .validation import is_browser_source, is_server_source

__all__ = [
    "is_bitmap",
    "is_browser_source",
    "is_pil_image",
    "is_server_source",
    "normalize_bitmap",
]
