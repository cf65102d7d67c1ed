from __future__ import annotations

from typing import Any

import numpy as np

from pixelite.types import RawImage
from pixelite.utils.optional_deps import optional_import


def is_pil_image(value: Any) -> bool:
    """True if `value` is a ``PIL.Image.Image`` (False when Pillow is absent)."""

    image_module, _ = optional_import("PIL.Image")
    if image_module is None:
        return False
    return isinstance(value, image_module.Image)


def is_bitmap(value: Any) -> bool:
    return isinstance(value, RawImage) or is_pil_image(value)


def normalize_bitmap(bitmap: Any) -> np.ndarray:
    """Normalize an already-decoded bitmap into canonical ``RGBA/u8/HWC``.

    Accepts `RawImage` and ``PIL.Image.Image`` (any mode; converted to RGBA).
    """

    if isinstance(bitmap, RawImage):
        return bitmap.to_array()

    if is_pil_image(bitmap):
        rgba = bitmap if bitmap.mode == "RGBA" else bitmap.convert("RGBA")
        arr = np.asarray(rgba, dtype=np.uint8)
        return np.ascontiguousarray(arr)

    raise TypeError(f"Expected RawImage or PIL.Image.Image, got {type(bitmap)}")
