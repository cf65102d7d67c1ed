import array
from pathlib import Path

import numpy as np
import pytest

from pixelite.inputs import (
    is_bitmap,
    is_browser_source,
    is_pil_image,
    is_server_source,
    normalize_bitmap,
)
from pixelite.types import RawImage


def _raw(width: int = 2, height: int = 1) -> RawImage:
    return RawImage(data=np.arange(width * height * 4, dtype=np.uint8), width=width, height=height)


def test_normalize_raw_image_is_hwc_view():
    raw = _raw()
    arr = normalize_bitmap(raw)
    assert arr.shape == (1, 2, 4)
    assert arr[0, 1].tolist() == [4, 5, 6, 7]


def test_normalize_pil_image_converts_to_rgba():
    from PIL import Image

    img = Image.new("RGB", (3, 2), color=(10, 20, 30))
    arr = normalize_bitmap(img)
    assert arr.shape == (2, 3, 4)
    assert arr.dtype == np.uint8
    assert arr[1, 2].tolist() == [10, 20, 30, 255]


def test_normalize_rejects_other_types():
    with pytest.raises(TypeError):
        normalize_bitmap(np.zeros((2, 2, 4), dtype=np.uint8))


def test_is_pil_image():
    from PIL import Image

    assert is_pil_image(Image.new("L", (1, 1)))
    assert not is_pil_image(b"bytes")


@pytest.mark.parametrize(
    "value",
    [
        "image.png",
        Path("image.png"),
        b"\x89PNG",
        bytearray(b"x"),
        memoryview(b"x"),
        array.array("B", [1]),
        np.zeros(4, dtype=np.float32),
    ],
)
def test_server_sources(value):
    assert is_server_source(value)


def test_server_rejects_bitmaps_and_objects():
    from PIL import Image

    assert not is_server_source(_raw())
    assert not is_server_source(Image.new("RGB", (1, 1)))
    assert not is_server_source(np.asarray([object()], dtype=object))
    assert not is_server_source(42)


def test_browser_sources():
    from PIL import Image

    assert is_browser_source("https://example.com/a.png")
    assert is_browser_source(b"\x89PNG")
    assert is_browser_source(_raw())
    assert is_browser_source(Image.new("RGBA", (1, 1)))
    assert is_bitmap(_raw())


@pytest.mark.parametrize(
    "value",
    [Path("image.png"), bytearray(b"x"), memoryview(b"x"), np.zeros(4, dtype=np.uint8)],
)
def test_browser_rejects_server_only_sources(value):
    assert not is_browser_source(value)
