from __future__ import annotations

import asyncio
import io
import logging
from types import ModuleType
from typing import Any, Optional

import numpy as np

from pixelite.backends.base import resolve_target_size
from pixelite.config.settings import PixeliteSettings
from pixelite.errors import DecodeError
from pixelite.inputs.validation import is_server_source
from pixelite.sources.resolver import resolve_bytes
from pixelite.types import RawImage
from pixelite.utils.optional_deps import LazyModule

logger = logging.getLogger(__name__)

_PIL_IMAGE = LazyModule("PIL.Image", purpose="native image decoding")


def _decode_bytes(
    image_module: ModuleType,
    data: bytes,
    width: Optional[int],
    height: Optional[int],
) -> RawImage:
    try:
        with image_module.open(io.BytesIO(data)) as img:
            img.load()
            rgba = img.convert("RGBA")
    except Exception as exc:  # noqa: BLE001 - backend boundary
        raise DecodeError(
            "Failed to decode image",
            {"byte_length": len(data)},
            cause=exc,
        ) from exc

    target = resolve_target_size(rgba.width, rgba.height, width, height)
    if target != rgba.size:
        rgba = rgba.resize(target, resample=image_module.Resampling.NEAREST)

    arr = np.asarray(rgba, dtype=np.uint8)
    return RawImage.from_array(arr)


class NativeBackend:
    """Pillow-backed decoder for encoded bytes, paths and URLs."""

    name = "native"

    def accepts(self, source: Any) -> bool:
        return is_server_source(source)

    async def decode(
        self,
        source: Any,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        settings: Optional[PixeliteSettings] = None,
    ) -> RawImage:
        data = await resolve_bytes(source, settings=settings)
        image_module = _PIL_IMAGE.get()
        image = await asyncio.to_thread(_decode_bytes, image_module, data, width, height)
        logger.debug("Decoded %d bytes to %dx%d RGBA", len(data), image.width, image.height)
        return image
