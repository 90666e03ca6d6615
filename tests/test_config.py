"""Tests for environment-driven settings."""

from pathlib import Path

from anchorscan.config import Settings


def test_defaults(monkeypatch):
    for name in (
        "ANCHORSCAN_MAX_ATTEMPTS",
        "ANCHORSCAN_BROWSER_PATH",
        "ANCHORSCAN_NAV_TIMEOUT",
        "ANCHORSCAN_VIEWPORT_WIDTH",
        "ANCHORSCAN_VIEWPORT_HEIGHT",
        "ANCHORSCAN_PAUSE",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings()
    assert s.max_url_attempts == 5
    assert s.browser_executable is None
    assert s.navigation_timeout == 30.0
    assert s.viewport == (1920, 1080)
    assert s.pause_on_exit is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ANCHORSCAN_MAX_ATTEMPTS", "3")
    monkeypatch.setenv("ANCHORSCAN_BROWSER_PATH", "/usr/bin/chromium")
    monkeypatch.setenv("ANCHORSCAN_NAV_TIMEOUT", "12.5")
    monkeypatch.setenv("ANCHORSCAN_VIEWPORT_WIDTH", "1280")
    monkeypatch.setenv("ANCHORSCAN_VIEWPORT_HEIGHT", "720")
    monkeypatch.setenv("ANCHORSCAN_PAUSE", "0")

    s = Settings()
    assert s.max_url_attempts == 3
    assert s.browser_executable == Path("/usr/bin/chromium")
    assert s.navigation_timeout == 12.5
    assert s.viewport == (1280, 720)
    assert s.pause_on_exit is False


def test_blank_browser_path_means_bundled(monkeypatch):
    monkeypatch.setenv("ANCHORSCAN_BROWSER_PATH", "   ")
    assert Settings().browser_executable is None
