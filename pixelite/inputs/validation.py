from __future__ import annotations

import array
import mmap
import os
from typing import Any

import numpy as np

from pixelite.inputs.bitmap import is_bitmap

_SERVER_BUFFER_TYPES = (bytes, bytearray, memoryview, array.array, mmap.mmap)


def is_server_source(value: Any) -> bool:
    """Encoded-image sources the native backend can resolve to bytes."""

    if isinstance(value, (str, os.PathLike)):
        return True
    if isinstance(value, _SERVER_BUFFER_TYPES):
        return True
    return isinstance(value, np.ndarray) and not value.dtype.hasobject


def is_browser_source(value: Any) -> bool:
    """Sources the canvas backend can turn into a bitmap.

    URL/path strings and encoded ``bytes`` blobs are decoded first; decoded
    bitmaps (`RawImage`, ``PIL.Image.Image``) are drawn directly.
    """

    if isinstance(value, (str, bytes)):
        return True
    return is_bitmap(value)
