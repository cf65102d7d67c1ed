from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, eq=False)
class RawImage:
    """Decoded pixels: flat RGBA bytes plus dimensions.

    `data` is a 1-D ``uint8`` array of length ``width * height * 4``. Alpha is
    always materialized, even for opaque sources.
    """

    data: NDArray[np.uint8]
    width: int
    height: int
    channels: int = 4

    def __post_init__(self) -> None:
        if int(self.channels) != 4:
            raise ValueError(f"RawImage.channels must be 4, got {self.channels!r}")
        if not isinstance(self.data, np.ndarray):
            raise TypeError(f"RawImage.data must be np.ndarray, got {type(self.data)}")
        if self.data.dtype != np.uint8 or self.data.ndim != 1:
            raise ValueError(
                f"RawImage.data must be a flat uint8 array, got dtype={self.data.dtype} "
                f"shape={self.data.shape}"
            )
        if int(self.width) < 0 or int(self.height) < 0:
            raise ValueError(f"RawImage dimensions must be >= 0, got {(self.width, self.height)}")
        expected = int(self.width) * int(self.height) * 4
        if int(self.data.size) != expected:
            raise ValueError(
                f"RawImage.data has {self.data.size} bytes, expected {expected} "
                f"for {self.width}x{self.height}x4"
            )

    @classmethod
    def from_array(cls, rgba: NDArray[np.uint8]) -> "RawImage":
        """Build from an ``(H, W, 4)`` uint8 array. The pixels are copied."""

        arr = np.asarray(rgba)
        if arr.ndim != 3 or arr.shape[2] != 4:
            raise ValueError(f"Expected shape (H,W,4), got {arr.shape}")
        if arr.dtype != np.uint8:
            raise ValueError(f"Expected dtype=uint8, got {arr.dtype}")
        h, w = int(arr.shape[0]), int(arr.shape[1])
        data = np.array(arr, dtype=np.uint8, copy=True, order="C").reshape(-1)
        return cls(data=data, width=w, height=h)

    def to_array(self) -> NDArray[np.uint8]:
        """Return an ``(H, W, 4)`` view over `data`."""

        return self.data.reshape(int(self.height), int(self.width), 4)
