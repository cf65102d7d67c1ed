from __future__ import annotations

from typing import Literal

import numpy as np

from pixelite.utils.optional_deps import LazyModule

ColorMode = Literal["bgr", "bgra", "rgb", "rgba", "gray"]

_CV2 = LazyModule("cv2", purpose="canvas image decoding")


def _to_uint8(image: np.ndarray) -> np.ndarray:
    if image.dtype == np.uint8:
        return image
    if image.dtype == np.uint16:
        return (image >> 8).astype(np.uint8)
    if image.dtype.kind == "f":
        scaled = np.clip(np.rint(image * 255.0), 0.0, 255.0)
        return scaled.astype(np.uint8)
    raise ValueError(f"Unsupported image dtype: {image.dtype}")


def to_rgba(image: np.ndarray, *, color: ColorMode) -> np.ndarray:
    """Convert an OpenCV-style image in `color` mode to RGBA ``(H,W,4)`` uint8."""

    cv2 = _CV2.get()
    img = _to_uint8(np.asarray(image))

    if color == "gray":
        if img.ndim == 3 and img.shape[2] == 1:
            img = img[..., 0]
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    if color == "bgr":
        return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    if color == "bgra":
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    if color == "rgb":
        return cv2.cvtColor(img, cv2.COLOR_RGB2RGBA)
    if color == "rgba":
        return np.ascontiguousarray(img)

    raise ValueError(f"Unknown color mode: {color!r}. Choose from: bgr, bgra, rgb, rgba, gray.")


def decode_image_bytes(data: bytes) -> np.ndarray:
    """Decode an encoded image (PNG/JPEG/...) into RGBA ``(H,W,4)`` uint8."""

    cv2 = _CV2.get()

    encoded = np.frombuffer(data, dtype=np.uint8)
    if encoded.size == 0:
        raise ValueError("Unable to decode image: empty buffer")

    img = cv2.imdecode(encoded, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Unable to decode image ({encoded.size} bytes)")

    if img.ndim == 2:
        return to_rgba(img, color="gray")
    channels = int(img.shape[2])
    if channels == 1:
        return to_rgba(img, color="gray")
    if channels == 3:
        return to_rgba(img, color="bgr")
    if channels == 4:
        return to_rgba(img, color="bgra")
    raise ValueError(f"Unsupported channel count: {channels}")


def resize_image(image: np.ndarray, size_hw: tuple[int, int]) -> np.ndarray:
    """Resize an image to (H,W) with nearest-neighbor sampling (no smoothing).

    Notes
    -----
    OpenCV uses (W,H) order for its `dsize` argument, while the rest of
    `pixelite` uses (H,W). This helper standardizes on (H,W).
    """

    cv2 = _CV2.get()

    h, w = int(size_hw[0]), int(size_hw[1])
    return cv2.resize(image, (w, h), interpolation=cv2.INTER_NEAREST)
