from __future__ import annotations

import json
from pathlib import Path
from typing import Any

SETTINGS_SECTION = "pixelite"
SETTINGS_SUFFIXES = (".json", ".yml", ".yaml")


class SettingsFileError(ValueError):
    """A settings file could not be read or does not hold a settings mapping."""

    def __init__(self, message: str, *, path: str | Path) -> None:
        super().__init__(message)
        self.path = str(path)


def _parse_text(text: str, *, suffix: str, path: Path) -> Any:
    if suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise SettingsFileError(
                f"Invalid JSON in settings file {str(path)!r}: {exc}", path=path
            ) from exc

    try:
        import yaml  # type: ignore[import-not-found]
    except Exception as exc:  # noqa: BLE001 - dependency boundary
        raise ImportError(
            "YAML settings files require PyYAML.\n"
            "Install it via:\n"
            "  pip install 'pixelite[yaml]'"
        ) from exc

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SettingsFileError(
            f"Invalid YAML in settings file {str(path)!r}: {exc}", path=path
        ) from exc


def read_settings_file(path: str | Path) -> dict[str, Any]:
    """Read the raw settings mapping from a JSON or YAML file.

    The file may hold the settings at the top level, or nested under a
    ``pixelite`` key so the section can live inside a larger project config.
    An empty file yields ``{}``. The mapping is not validated here; see
    `PixeliteSettings.from_dict`.
    """

    settings_path = Path(path)
    suffix = str(settings_path.suffix).lower()
    if suffix not in SETTINGS_SUFFIXES:
        raise SettingsFileError(
            f"Unsupported settings file extension {suffix!r} for {str(settings_path)!r}. "
            f"Supported: {', '.join(SETTINGS_SUFFIXES)}.",
            path=settings_path,
        )

    try:
        text = settings_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsFileError(
            f"Failed to read settings file {str(settings_path)!r}: {exc}", path=settings_path
        ) from exc

    data = _parse_text(text, suffix=suffix, path=settings_path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsFileError(
            f"Settings must be an object/dict at the top level, got {type(data).__name__} "
            f"from {str(settings_path)!r}.",
            path=settings_path,
        )

    if SETTINGS_SECTION in data:
        section = data[SETTINGS_SECTION]
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise SettingsFileError(
                f"{SETTINGS_SECTION!r} section must be an object/dict, got "
                f"{type(section).__name__} from {str(settings_path)!r}.",
                path=settings_path,
            )
        return dict(section)

    return dict(data)
