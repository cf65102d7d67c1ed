import pytest

import pixelite.env as env_module
from pixelite.config.settings import ENV_ENVIRONMENT, PixeliteSettings
from pixelite.env import Environment, detect_environment, parse_environment


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("server", Environment.SERVER),
        ("BROWSER", Environment.BROWSER),
        (Environment.SERVER, Environment.SERVER),
    ],
)
def test_parse_environment(raw, expected):
    assert parse_environment(raw) is expected


def test_parse_environment_rejects_unknown():
    with pytest.raises(ValueError):
        parse_environment("auto")


def test_explicit_setting_wins(monkeypatch):
    monkeypatch.setattr(env_module.sys, "platform", "emscripten")
    assert detect_environment(PixeliteSettings(environment="server")) is Environment.SERVER


def test_auto_uses_platform(monkeypatch):
    auto = PixeliteSettings()

    monkeypatch.setattr(env_module.sys, "platform", "emscripten")
    assert detect_environment(auto) is Environment.BROWSER

    monkeypatch.setattr(env_module.sys, "platform", "linux")
    assert detect_environment(auto) is Environment.SERVER


def test_detection_is_not_cached(monkeypatch):
    monkeypatch.setenv(ENV_ENVIRONMENT, "browser")
    assert detect_environment() is Environment.BROWSER

    monkeypatch.setenv(ENV_ENVIRONMENT, "server")
    assert detect_environment() is Environment.SERVER


def test_detection_ignores_http_options(monkeypatch):
    monkeypatch.setenv(ENV_ENVIRONMENT, "browser")
    monkeypatch.setenv("PIXELITE_HTTP_TIMEOUT", "abc")
    assert detect_environment() is Environment.BROWSER
