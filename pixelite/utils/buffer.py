from __future__ import annotations

from typing import Any

import numpy as np


def byte_length(buffer: Any) -> int | None:
    """Best-effort byte length of a buffer-protocol object (for diagnostics)."""

    nbytes = getattr(buffer, "nbytes", None)
    if nbytes is not None:
        return int(nbytes)
    try:
        return int(memoryview(buffer).nbytes)
    except (TypeError, ValueError):
        return None


def as_byte_view(buffer: Any) -> np.ndarray:
    """Return a flat ``uint8`` view over the raw bytes of `buffer`.

    Views are honored: a `memoryview` slice or a numpy view over part of a
    larger buffer yields only the bytes it covers. Non-contiguous views are
    copied. Element width is irrelevant, e.g. a ``uint32`` array of length 2
    produces 8 bytes.
    """

    if isinstance(buffer, np.ndarray):
        if buffer.dtype.hasobject:
            raise TypeError(f"Expected a numeric array, got dtype={buffer.dtype}")
        flat = np.ascontiguousarray(buffer).reshape(-1)
        return flat.view(np.uint8)

    try:
        view = memoryview(buffer)
    except TypeError as exc:
        raise TypeError(
            f"Expected a bytes-like object, got {type(buffer).__name__}"
        ) from exc

    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    return np.frombuffer(view.cast("B"), dtype=np.uint8)
