from __future__ import annotations

import sys
from enum import Enum
from typing import Optional

from pixelite.config.settings import PixeliteSettings, environment_from_env


class Environment(str, Enum):
    """Which external decoding facility serves a call."""

    SERVER = "server"
    BROWSER = "browser"


def parse_environment(raw: str | Environment) -> Environment:
    if isinstance(raw, Environment):
        return raw
    try:
        return Environment(str(raw).strip().lower())
    except Exception as exc:  # noqa: BLE001 - value validation helper
        raise ValueError(f"Unknown environment: {raw!r}") from exc


def detect_environment(settings: Optional[PixeliteSettings] = None) -> Environment:
    """Detect the active environment. Not cached: evaluated on every call.

    An explicit ``settings.environment`` (or ``PIXELITE_ENV`` when `settings`
    is omitted) wins. Otherwise Pyodide (``sys.platform == "emscripten"``)
    is the browser environment and everything else is a server.
    """

    requested = environment_from_env() if settings is None else settings.environment

    if requested != "auto":
        return parse_environment(requested)
    if sys.platform == "emscripten":
        return Environment.BROWSER
    return Environment.SERVER
