from __future__ import annotations

from .image import decode_image_bytes, resize_image, to_rgba

__all__ = ["decode_image_bytes", "resize_image", "to_rgba"]
