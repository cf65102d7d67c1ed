from __future__ import annotations

import math
from typing import Any, Iterable, Optional, Union

import numpy as np

from pixelite.errors import AmbiguousLengthError, InvalidLengthError
from pixelite.utils.buffer import as_byte_view

_U32_MASK = 0xFFFFFFFF
_OPAQUE = 0xFF

PixelWords = Union[list, np.ndarray]


def _to_uint32(value: Any) -> int:
    if isinstance(value, (float, np.floating)) and not math.isfinite(value):
        return 0
    return int(value) & _U32_MASK


def as_uint32_words(words: Iterable[Any]) -> np.ndarray:
    """Coerce `words` to a flat ``uint32`` array by unsigned 32-bit truncation.

    Negative and out-of-range values wrap silently (``-1 -> 0xFFFFFFFF``),
    floats truncate toward zero and non-finite floats become 0.
    """

    if isinstance(words, np.ndarray) and words.dtype.kind in "biu":
        return words.reshape(-1).astype(np.uint32)
    if isinstance(words, np.ndarray):
        words = words.reshape(-1).tolist()
    return np.fromiter((_to_uint32(w) for w in words), dtype=np.uint32)


def pack_pixels(words: Iterable[Any]) -> np.ndarray:
    """Convert 32-bit ARGB words (``0xAARRGGBB``) into RGBA bytes.

    Returns a flat ``uint8`` array of length ``4 * len(words)`` laid out as
    ``[R, G, B, A, R, G, B, A, ...]``.

    Example
    -------
    >>> pack_pixels([0xFFFF0000]).tolist()
    [255, 0, 0, 255]
    """

    px = as_uint32_words(words)
    out = np.empty(px.size * 4, dtype=np.uint8)
    out[0::4] = ((px >> np.uint32(16)) & np.uint32(0xFF)).astype(np.uint8)
    out[1::4] = ((px >> np.uint32(8)) & np.uint32(0xFF)).astype(np.uint8)
    out[2::4] = (px & np.uint32(0xFF)).astype(np.uint8)
    out[3::4] = ((px >> np.uint32(24)) & np.uint32(0xFF)).astype(np.uint8)
    return out


def resolve_bytes_per_pixel(length: int, bytes_per_pixel: Optional[int] = None) -> int:
    """Pick the channel count for a buffer of `length` bytes.

    An explicit `bytes_per_pixel` must divide `length`. Otherwise 4 is chosen
    whenever it divides (RGBA wins the 12-byte tie), then 3.
    """

    length = int(length)
    if bytes_per_pixel is not None:
        size = int(bytes_per_pixel)
        if size not in (3, 4):
            raise ValueError(f"bytes_per_pixel must be 3 or 4, got {bytes_per_pixel!r}")
        if length % size != 0:
            raise InvalidLengthError(
                f"Invalid buffer length {length}: not a multiple of {size}",
                {"byte_length": length, "bytes_per_pixel": size},
            )
        return size

    if length % 4 == 0:
        return 4
    if length % 3 == 0:
        return 3
    raise AmbiguousLengthError(
        f"Ambiguous buffer length {length}: not a multiple of 3 or 4",
        {"byte_length": length},
    )


def unpack_pixels(
    buffer: Any,
    *,
    bytes_per_pixel: Optional[int] = None,
    as_array: bool = False,
) -> PixelWords:
    """Convert an RGB or RGBA byte buffer into 32-bit ARGB words.

    Parameters
    ----------
    buffer:
        Any bytes-like object or numpy array. Its raw bytes are read, so a
        view over part of a larger buffer only contributes the bytes it covers.
    bytes_per_pixel:
        3 (RGB, alpha defaults to ``0xFF``) or 4 (RGBA). Auto-detected when
        omitted, preferring 4.
    as_array:
        Return a ``uint32`` numpy array instead of a list of ints. Values are
        identical either way.
    """

    data = as_byte_view(buffer)
    size = resolve_bytes_per_pixel(data.size, bytes_per_pixel)

    pixels = data.reshape(-1, size).astype(np.uint32)
    red = pixels[:, 0]
    green = pixels[:, 1]
    blue = pixels[:, 2]
    if size == 4:
        alpha = pixels[:, 3]
    else:
        alpha = np.full(pixels.shape[0], _OPAQUE, dtype=np.uint32)

    words = (
        (alpha << np.uint32(24))
        | (red << np.uint32(16))
        | (green << np.uint32(8))
        | blue
    ).astype(np.uint32)

    if as_array:
        return words
    return words.tolist()
