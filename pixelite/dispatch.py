from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from pixelite.backends.base import DecoderBackend
from pixelite.backends.canvas import CanvasBackend
from pixelite.backends.native import NativeBackend
from pixelite.config.settings import PixeliteSettings
from pixelite.env import Environment, detect_environment
from pixelite.errors import DecodeError, InvalidInputTypeError, PixeliteError
from pixelite.types import RawImage

logger = logging.getLogger(__name__)

_BACKENDS: dict[Environment, DecoderBackend] = {
    Environment.SERVER: NativeBackend(),
    Environment.BROWSER: CanvasBackend(),
}


def get_backend(environment: Environment) -> DecoderBackend:
    try:
        return _BACKENDS[environment]
    except KeyError as exc:
        raise ValueError(f"No backend registered for environment: {environment!r}") from exc


async def decode(
    source: Any,
    *,
    width: Optional[int] = None,
    height: Optional[int] = None,
    settings: Optional[PixeliteSettings] = None,
) -> RawImage:
    """Decode `source` into RGBA pixels using the backend for the active environment.

    Parameters
    ----------
    source:
        Server: URL/path ``str``, ``os.PathLike``, ``bytes``, ``bytearray``,
        ``memoryview``, ``array.array``, ``mmap.mmap`` or a numeric
        ``np.ndarray`` holding encoded image bytes.
        Browser: URL/path ``str``, encoded ``bytes``, `RawImage` or
        ``PIL.Image.Image``.
    width, height:
        Optional output size. Scaling is nearest-neighbor; with both given the
        image is stretched to fill.
    settings:
        Runtime settings. When omitted, the environment comes from
        ``PIXELITE_ENV`` and HTTP options are read only if a URL is fetched.

    Raises
    ------
    InvalidInputTypeError
        `source` is not a valid input for the active environment.
    PixeliteError
        Any classified resolution/decode failure, re-raised unchanged.
    """

    environment = detect_environment(settings)
    backend = get_backend(environment)
    received = type(source).__name__

    if not backend.accepts(source):
        raise InvalidInputTypeError(
            f"Invalid input type for {environment.value} environment: {received}",
            environment=environment.value,
            received_type=received,
        )

    logger.debug("Decoding %s via %s backend (%s)", received, backend.name, environment.value)
    try:
        return await backend.decode(source, width=width, height=height, settings=settings)
    except (PixeliteError, ImportError):
        raise
    except Exception as exc:  # noqa: BLE001 - backend boundary
        details: dict[str, Any] = {"source_type": received, "backend": backend.name}
        if isinstance(source, str):
            details["source"] = source
        raise DecodeError("Image processing failed", details, cause=exc) from exc


def decode_sync(
    source: Any,
    *,
    width: Optional[int] = None,
    height: Optional[int] = None,
    settings: Optional[PixeliteSettings] = None,
) -> RawImage:
    """Blocking wrapper around `decode` for code without an event loop."""

    return asyncio.run(decode(source, width=width, height=height, settings=settings))
