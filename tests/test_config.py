from __future__ import annotations

import pytest

from pdfeditx.config import Settings, get_settings


def test_defaults() -> None:
    assert get_settings() == Settings()
    assert get_settings().ghostscript_timeout == 300.0


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PDFEDITX_GHOSTSCRIPT", "/opt/gs/bin/gs")
    monkeypatch.setenv("PDFEDITX_GHOSTSCRIPT_TIMEOUT", "60")
    monkeypatch.setenv("PDFEDITX_PROBE_TIMEOUT", "2.5")
    monkeypatch.setenv("PDFEDITX_COMPATIBILITY_LEVEL", "1.7")
    monkeypatch.setenv("PDFEDITX_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.ghostscript_path == "/opt/gs/bin/gs"
    assert settings.ghostscript_timeout == 60.0
    assert settings.probe_timeout == 2.5
    assert settings.compatibility_level == "1.7"
    assert settings.log_level == "debug"


@pytest.mark.parametrize("value", ["0", "", "-3"])
def test_timeout_can_be_disabled(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("PDFEDITX_GHOSTSCRIPT_TIMEOUT", value)
    assert get_settings().ghostscript_timeout is None


def test_invalid_timeout_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PDFEDITX_GHOSTSCRIPT_TIMEOUT", "soon")
    assert get_settings().ghostscript_timeout == 300.0


def test_settings_are_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("PDFEDITX_COMPATIBILITY_LEVEL", "1.6")
    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().compatibility_level == "1.6"
