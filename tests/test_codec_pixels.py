import array

import numpy as np
import pytest

from pixelite.codec.pixels import (
    as_uint32_words,
    pack_pixels,
    resolve_bytes_per_pixel,
    unpack_pixels,
)
from pixelite.errors import AmbiguousLengthError, DecodeError, InvalidLengthError


def test_pack_layout_is_rgba():
    out = pack_pixels([0xFFFF0000, 0x80112233])
    assert out.dtype == np.uint8
    assert out.tolist() == [255, 0, 0, 255, 0x11, 0x22, 0x33, 0x80]


def test_pack_empty():
    out = pack_pixels([])
    assert out.dtype == np.uint8
    assert out.size == 0


@pytest.mark.parametrize(
    "value,expected",
    [
        (-1, [0xFF, 0xFF, 0xFF, 0xFF]),
        (0x1_00000000, [0, 0, 0, 0]),
        (0x1_FF010203, [0x01, 0x02, 0x03, 0xFF]),
        (-0x01000000, [0, 0, 0, 0xFF]),
    ],
)
def test_pack_unsigned_coercion(value, expected):
    assert pack_pixels([value]).tolist() == expected


def test_pack_accepts_numpy_arrays():
    signed = np.asarray([-1, 0x7F000001], dtype=np.int64)
    assert pack_pixels(signed).tolist() == [255, 255, 255, 255, 0, 0, 1, 0x7F]

    unsigned = np.asarray([[0xFF000000], [0x00FFFFFF]], dtype=np.uint32)
    assert pack_pixels(unsigned).tolist() == [0, 0, 0, 255, 255, 255, 255, 0]


def test_as_uint32_words_floats_truncate():
    words = as_uint32_words([1.9, -1.5, float("nan"), float("inf")])
    assert words.dtype == np.uint32
    assert words.tolist() == [1, 0xFFFFFFFF, 0, 0]


@pytest.mark.parametrize("dtype", [np.float32, np.float64])
def test_pack_numpy_float_scalars_never_raise(dtype):
    scalars = list(np.asarray([1.0, np.nan, np.inf, -np.inf, -1.0], dtype=dtype))
    assert isinstance(scalars[1], np.floating)

    assert as_uint32_words(scalars).tolist() == [1, 0, 0, 0, 0xFFFFFFFF]
    assert pack_pixels(scalars).tolist()[4:16] == [0] * 12


def test_pack_float_array_with_non_finite_values():
    arr = np.asarray([np.nan, 2.0], dtype=np.float32)
    assert pack_pixels(arr).tolist() == [0, 0, 0, 0, 0, 0, 2, 0]


def test_unpack_rgba_words():
    buf = bytes([255, 0, 0, 255, 0x11, 0x22, 0x33, 0x44])
    assert unpack_pixels(buf, bytes_per_pixel=4) == [0xFFFF0000, 0x44112233]


def test_unpack_rgb_defaults_alpha_opaque():
    assert unpack_pixels(bytes([0x11, 0x22, 0x33]), bytes_per_pixel=3) == [0xFF112233]


def test_unpack_autodetect_prefers_rgba_on_tie():
    words = unpack_pixels(bytes(range(12)))
    assert len(words) == 3
    assert words[0] == 0x03000102


def test_unpack_autodetect_falls_back_to_rgb():
    words = unpack_pixels(bytes([1, 2, 3, 4, 5, 6, 7, 8, 9]))
    assert words == [0xFF010203, 0xFF040506, 0xFF070809]


def test_unpack_empty_buffer():
    assert unpack_pixels(b"") == []


def test_unpack_ambiguous_length():
    with pytest.raises(AmbiguousLengthError) as exc:
        unpack_pixels(bytes(5))
    assert isinstance(exc.value, InvalidLengthError)
    assert isinstance(exc.value, DecodeError)
    assert exc.value.details["byte_length"] == 5


def test_unpack_explicit_size_not_a_multiple():
    with pytest.raises(InvalidLengthError) as exc:
        unpack_pixels(bytes(7), bytes_per_pixel=4)
    assert "not a multiple of 4" in str(exc.value)
    assert not isinstance(exc.value, AmbiguousLengthError)


def test_unpack_rejects_unknown_bytes_per_pixel():
    with pytest.raises(ValueError):
        unpack_pixels(bytes(8), bytes_per_pixel=2)


def test_unpack_as_array_matches_list():
    buf = bytes([0xFF] * 4 + [0, 0, 0, 0] + [1, 2, 3, 4])
    as_list = unpack_pixels(buf)
    as_arr = unpack_pixels(buf, as_array=True)
    assert isinstance(as_list, list)
    assert isinstance(as_arr, np.ndarray)
    assert as_arr.dtype == np.uint32
    assert as_arr.tolist() == as_list == [0xFFFFFFFF, 0, 0x04010203]


def test_unpack_respects_views():
    backing = bytearray(range(12))
    view = memoryview(backing)[4:8]
    assert unpack_pixels(view) == [0x07040506]

    arr = np.arange(12, dtype=np.uint8)[4:8]
    assert unpack_pixels(arr) == [0x07040506]


def test_unpack_reads_raw_bytes_of_wide_arrays():
    words = array.array("I", [0])
    assert unpack_pixels(words) == [0]
    wide = np.asarray([0x04030201], dtype="<u4")
    assert unpack_pixels(wide) == [0x04010203]


def test_unpack_non_contiguous_view_is_copied():
    base = np.arange(16, dtype=np.uint8)
    strided = memoryview(base)[::2]
    assert unpack_pixels(strided) == [0x06000204, 0x0E080A0C]


@pytest.mark.parametrize("words", [[0x00000000], [0xFFFFFFFF], [0x01234567, 0x89ABCDEF, 0x7F7F7F7F]])
def test_pack_then_unpack_roundtrip(words):
    assert unpack_pixels(pack_pixels(words), bytes_per_pixel=4) == words


def test_unpack_then_pack_roundtrip_random_bytes():
    rng = np.random.default_rng(0)
    buf = rng.integers(0, 256, size=64, dtype=np.uint8)
    assert np.array_equal(pack_pixels(unpack_pixels(buf, bytes_per_pixel=4)), buf)


def test_rgb_repacks_as_rgba():
    words = unpack_pixels(bytes([1, 2, 3, 4, 5, 6]), bytes_per_pixel=3)
    assert pack_pixels(words).tolist() == [1, 2, 3, 255, 4, 5, 6, 255]


def test_resolve_bytes_per_pixel():
    assert resolve_bytes_per_pixel(12) == 4
    assert resolve_bytes_per_pixel(9) == 3
    assert resolve_bytes_per_pixel(12, 3) == 3
    with pytest.raises(AmbiguousLengthError):
        resolve_bytes_per_pixel(10)
