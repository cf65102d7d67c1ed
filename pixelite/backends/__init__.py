"""Decoding backends.

- `NativeBackend` (Pillow) serves the server environment.
- `CanvasBackend` (OpenCV) serves the browser environment (e.g. Pyodide).
"""

from __future__ import annotations

from .base import DecoderBackend, resolve_target_size
from .canvas import CanvasBackend, rasterize
from .native import NativeBackend

__all__ = [
    "CanvasBackend",
    "DecoderBackend",
    "NativeBackend",
    "rasterize",
    "resolve_target_size",
]
