from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import numpy as np

from pixelite.backends.base import resolve_target_size
from pixelite.config.settings import PixeliteSettings
from pixelite.errors import DecodeError
from pixelite.inputs.bitmap import normalize_bitmap
from pixelite.inputs.validation import is_browser_source
from pixelite.io.image import decode_image_bytes, resize_image
from pixelite.sources.resolver import resolve_bytes
from pixelite.types import RawImage

logger = logging.getLogger(__name__)


def rasterize(bitmap: np.ndarray, width: Optional[int] = None, height: Optional[int] = None) -> RawImage:
    """Draw an RGBA bitmap onto a surface of the target size and read it back.

    Scaling uses nearest-neighbor sampling, so no new colors are introduced.
    """

    src_h, src_w = int(bitmap.shape[0]), int(bitmap.shape[1])
    tw, th = resolve_target_size(src_w, src_h, width, height)
    surface = bitmap if (tw, th) == (src_w, src_h) else resize_image(bitmap, (th, tw))
    return RawImage.from_array(surface)


class CanvasBackend:
    """OpenCV-backed bitmap pipeline for decoded images and encoded blobs."""

    name = "canvas"

    def accepts(self, source: Any) -> bool:
        return is_browser_source(source)

    async def _create_bitmap(self, source: Any, settings: Optional[PixeliteSettings]) -> np.ndarray:
        if isinstance(source, (str, bytes)):
            data = await resolve_bytes(source, settings=settings)
            try:
                return await asyncio.to_thread(decode_image_bytes, data)
            except ImportError:
                raise
            except Exception as exc:  # noqa: BLE001 - backend boundary
                details: dict[str, Any] = {"byte_length": len(data)}
                if isinstance(source, str):
                    details["source"] = source
                raise DecodeError("Failed to decode image", details, cause=exc) from exc

        try:
            return normalize_bitmap(source)
        except Exception as exc:  # noqa: BLE001 - backend boundary
            raise DecodeError(
                "Failed to process image source",
                {"source_type": type(source).__name__},
                cause=exc,
            ) from exc

    async def decode(
        self,
        source: Any,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        settings: Optional[PixeliteSettings] = None,
    ) -> RawImage:
        bitmap = await self._create_bitmap(source, settings)
        image = await asyncio.to_thread(rasterize, bitmap, width, height)
        logger.debug("Rasterized %s to %dx%d RGBA", type(source).__name__, image.width, image.height)
        return image
