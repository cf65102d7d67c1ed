from __future__ import annotations

from .resolver import Failed, Resolution, Resolved, is_remote_url, resolve_bytes, resolve_source

__all__ = [
    "Failed",
    "Resolution",
    "Resolved",
    "is_remote_url",
    "resolve_bytes",
    "resolve_source",
]
