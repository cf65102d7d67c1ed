from __future__ import annotations

from .io import SettingsFileError, read_settings_file
from .settings import PixeliteSettings, environment_from_env, load_settings

__all__ = [
    "PixeliteSettings",
    "SettingsFileError",
    "environment_from_env",
    "load_settings",
    "read_settings_file",
]
