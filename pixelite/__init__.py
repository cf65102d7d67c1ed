"""pixelite - normalize image sources into raw RGBA pixels.

Keep top-level imports lightweight: the decoding backends depend on optional
heavy deps (Pillow, OpenCV, requests). We lazy-load these exports on demand
so that `import pixelite` and the numpy-only transcoder work in minimal
environments.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__version__ = "0.1.0"

__all__ = [
    # Modules
    "backends",
    "codec",
    "config",
    "errors",
    "inputs",
    "sources",
    # Transcoding
    "pack_pixels",
    "unpack_pixels",
    # Decoding
    "RawImage",
    "decode",
    "decode_sync",
    "resolve_bytes",
    "Environment",
    "detect_environment",
    "PixeliteSettings",
    # Errors
    "PixeliteError",
    "DecodeError",
    "InvalidLengthError",
    "AmbiguousLengthError",
    "NetworkError",
    "FileReadError",
    "UnsupportedSourceError",
    "InvalidInputTypeError",
]


_LAZY_SUBMODULES = {
    "backends",
    "codec",
    "config",
    "errors",
    "inputs",
    "sources",
}

_LAZY_EXPORTS = {
    # Transcoding
    "pack_pixels": ("codec.pixels", "pack_pixels"),
    "unpack_pixels": ("codec.pixels", "unpack_pixels"),
    # Decoding
    "RawImage": ("types", "RawImage"),
    "decode": ("dispatch", "decode"),
    "decode_sync": ("dispatch", "decode_sync"),
    "resolve_bytes": ("sources.resolver", "resolve_bytes"),
    "Environment": ("env", "Environment"),
    "detect_environment": ("env", "detect_environment"),
    "PixeliteSettings": ("config.settings", "PixeliteSettings"),
    # Errors
    "PixeliteError": ("errors", "PixeliteError"),
    "DecodeError": ("errors", "DecodeError"),
    "InvalidLengthError": ("errors", "InvalidLengthError"),
    "AmbiguousLengthError": ("errors", "AmbiguousLengthError"),
    "NetworkError": ("errors", "NetworkError"),
    "FileReadError": ("errors", "FileReadError"),
    "UnsupportedSourceError": ("errors", "UnsupportedSourceError"),
    "InvalidInputTypeError": ("errors", "InvalidInputTypeError"),
}


def __getattr__(name: str) -> Any:  # pragma: no cover - thin delegation
    if name in _LAZY_SUBMODULES:
        module = import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module

    target = _LAZY_EXPORTS.get(name)
    if target is not None:
        module_name, attr = target
        module = import_module(f"{__name__}.{module_name}")
        value = getattr(module, attr)
        globals()[name] = value
        return value

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - tooling convenience
    return sorted(set(globals()) | set(__all__))
