"""Turn heterogeneous image sources into one contiguous ``bytes`` buffer.

Internally every branch returns a `Resolved` or `Failed` value instead of
raising; `resolve_bytes` is the only place the classified error is raised.
"""

from __future__ import annotations

import array
import asyncio
import logging
import mmap
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import numpy as np
import requests

from pixelite.config.settings import PixeliteSettings
from pixelite.errors import (
    DecodeError,
    FileReadError,
    NetworkError,
    PixeliteError,
    UnsupportedSourceError,
)
from pixelite.utils.buffer import as_byte_view, byte_length

logger = logging.getLogger(__name__)

_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)

_CONTAINER_TYPES = (bytearray, mmap.mmap)
_VIEW_TYPES = (memoryview, array.array, np.ndarray)


@dataclass(frozen=True)
class Resolved:
    data: bytes


@dataclass(frozen=True)
class Failed:
    error: PixeliteError


Resolution = Union[Resolved, Failed]


def is_remote_url(value: str) -> bool:
    return bool(_URL_PATTERN.match(value))


def _type_name(value: Any) -> str:
    return type(value).__name__


async def _fetch_url(url: str, settings: Optional[PixeliteSettings]) -> Resolution:
    # Only URL fetches depend on the environment-derived HTTP options.
    if settings is None:
        settings = PixeliteSettings.from_env()

    logger.debug("Fetching image from %s", url)
    try:
        response = await asyncio.to_thread(
            requests.get,
            url,
            timeout=settings.http_timeout,
            headers=dict(settings.http_headers) or None,
        )
    except requests.RequestException as exc:
        return Failed(NetworkError(f"Failed to fetch URL: {url}", {"url": url}, cause=exc))

    status = int(response.status_code)
    if not 200 <= status < 300:
        return Failed(
            NetworkError(
                f"Image fetch failed (HTTP {status})",
                {"url": url, "status": status},
                cause=requests.HTTPError(str(response.reason), response=response),
            )
        )
    return Resolved(bytes(response.content))


async def _read_file(path: str) -> Resolution:
    logger.debug("Reading image from %s", path)
    try:
        data = await asyncio.to_thread(Path(path).read_bytes)
    except OSError as exc:
        return Failed(FileReadError(f"Failed to read file: {path}", {"path": path}, cause=exc))
    return Resolved(data)


def _wrap_container(source: Any) -> Resolution:
    try:
        return Resolved(bytes(source))
    except (TypeError, ValueError, BufferError) as exc:
        return Failed(
            DecodeError(
                f"{_type_name(source)} -> bytes conversion failed",
                {"byte_length": byte_length(source)},
                cause=exc,
            )
        )


def _slice_view(source: Any) -> Resolution:
    try:
        return Resolved(as_byte_view(source).tobytes())
    except (TypeError, ValueError, BufferError) as exc:
        return Failed(
            DecodeError(
                f"{_type_name(source)} -> bytes conversion failed",
                {"constructor": _type_name(source), "byte_length": byte_length(source)},
                cause=exc,
            )
        )


async def resolve_source(source: Any, *, settings: Optional[PixeliteSettings] = None) -> Resolution:
    """Resolve `source` to bytes without raising classified errors."""

    if isinstance(source, bytes):
        return Resolved(source)

    if isinstance(source, str):
        if is_remote_url(source):
            return await _fetch_url(source, settings)
        return await _read_file(source)

    if isinstance(source, os.PathLike):
        return await _read_file(os.fsdecode(source))

    if isinstance(source, _CONTAINER_TYPES):
        return _wrap_container(source)

    if isinstance(source, _VIEW_TYPES):
        return _slice_view(source)

    name = _type_name(source)
    return Failed(
        UnsupportedSourceError(f"Unsupported image source type: {name}", {"received_type": name})
    )


async def resolve_bytes(source: Any, *, settings: Optional[PixeliteSettings] = None) -> bytes:
    """Resolve `source` to ``bytes``, raising a `PixeliteError` on failure.

    Supported sources:
    - ``bytes``: returned unchanged
    - ``str``: ``http(s)://`` URLs are fetched (any non-2xx status fails),
      anything else is a file path
    - ``os.PathLike``: file path
    - ``bytearray`` / ``mmap.mmap``: copied
    - ``memoryview`` / ``array.array`` / ``np.ndarray``: exactly the viewed bytes
    """

    result = await resolve_source(source, settings=settings)
    if isinstance(result, Failed):
        logger.debug("Source resolution failed: %r", result.error)
        raise result.error
    return result.data
