from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from pixelite.config.io import read_settings_file

ENV_ENVIRONMENT = "PIXELITE_ENV"
ENV_HTTP_TIMEOUT = "PIXELITE_HTTP_TIMEOUT"

ENVIRONMENT_CHOICES = ("auto", "server", "browser")


def _require_mapping(value: Any, *, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{name} must be a dict/object, got {type(value).__name__}")
    return value


def _parse_environment(value: Any) -> str:
    if value is None:
        return "auto"
    env = str(value).strip().lower()
    if not env:
        return "auto"
    if env not in ENVIRONMENT_CHOICES:
        raise ValueError(
            f"environment must be one of {', '.join(ENVIRONMENT_CHOICES)}, got {value!r}"
        )
    return env


def _optional_timeout(value: Any, *, name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        timeout = float(value)
    except Exception as exc:  # noqa: BLE001 - validation boundary
        raise ValueError(f"{name} must be a number or null, got {value!r}") from exc
    if timeout <= 0:
        raise ValueError(f"{name} must be positive, got {timeout}")
    return timeout


def _parse_headers(value: Any) -> tuple[tuple[str, str], ...]:
    if value is None:
        return ()
    if isinstance(value, Mapping):
        items = list(value.items())
    elif isinstance(value, (list, tuple)):
        items = list(value)
        for item in items:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                raise ValueError(f"http_headers entries must be (name, value) pairs, got {item!r}")
    else:
        raise ValueError(f"http_headers must be a dict/object, got {type(value).__name__}")
    return tuple((str(k), str(v)) for k, v in items)


def environment_from_env(environ: Optional[Mapping[str, str]] = None) -> str:
    """Read only ``PIXELITE_ENV``; HTTP options are not parsed."""

    env = os.environ if environ is None else environ
    return _parse_environment(env.get(ENV_ENVIRONMENT, None))


@dataclass(frozen=True)
class PixeliteSettings:
    """Runtime knobs for source resolution and backend dispatch.

    `environment` is ``"auto"`` (detected per call), ``"server"`` or
    ``"browser"``. `http_timeout` is passed straight to `requests`; ``None``
    means no timeout. `http_headers` accepts a mapping and is stored as an
    immutable tuple of ``(name, value)`` pairs.
    """

    environment: str = "auto"
    http_timeout: float | None = None
    http_headers: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "http_headers", _parse_headers(self.http_headers))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "PixeliteSettings":
        top = _require_mapping(raw, name="settings")
        unknown = sorted(set(top) - {"environment", "http_timeout", "http_headers"})
        if unknown:
            raise ValueError(f"Unknown settings keys: {', '.join(unknown)}")

        headers = top.get("http_headers", None)
        if headers is not None:
            _require_mapping(headers, name="http_headers")

        return cls(
            environment=_parse_environment(top.get("environment", None)),
            http_timeout=_optional_timeout(top.get("http_timeout", None), name="http_timeout"),
            http_headers=_parse_headers(headers),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PixeliteSettings":
        env = os.environ if environ is None else environ
        return cls(
            environment=environment_from_env(env),
            http_timeout=_optional_timeout(env.get(ENV_HTTP_TIMEOUT, None), name=ENV_HTTP_TIMEOUT),
        )


def load_settings(path: str | Path) -> PixeliteSettings:
    """Load `PixeliteSettings` from a JSON/YAML settings file."""

    return PixeliteSettings.from_dict(read_settings_file(path))
