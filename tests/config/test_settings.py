"""Tests for LoggingSettings — env-driven logging configuration."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from follownet.config.settings import LoggingSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "FOLLOWNET_VERBOSE",
        "FOLLOWNET_LOG_JSON",
        "FOLLOWNET_LOG_LEVEL",
        "FOLLOWNET_QUIET_LOGGERS",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = LoggingSettings()
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.log_level is None
        assert settings.quiet_loggers == []
        assert settings.app_level == logging.WARNING

    def test_frozen(self) -> None:
        settings = LoggingSettings()
        with pytest.raises(ValidationError):
            settings.verbose = True  # type: ignore[misc]


class TestAppLevel:
    def test_verbose_is_debug(self) -> None:
        assert LoggingSettings(verbose=True).app_level == logging.DEBUG

    def test_explicit_level_wins(self) -> None:
        assert LoggingSettings(verbose=True, log_level="ERROR").app_level == logging.ERROR

    def test_invalid_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(log_level="LOUD")  # type: ignore[arg-type]


class TestEnvVars:
    def test_env_var_read(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOLLOWNET_VERBOSE", "true")
        monkeypatch.setenv("FOLLOWNET_LOG_LEVEL", "INFO")
        settings = LoggingSettings()
        assert settings.verbose is True
        assert settings.app_level == logging.INFO

    def test_list_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOLLOWNET_QUIET_LOGGERS", '["urllib3", "asyncio"]')
        assert LoggingSettings().quiet_loggers == ["urllib3", "asyncio"]

    def test_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOLLOWNET_VERBOSE", "true")
        assert LoggingSettings(verbose=False).verbose is False

    def test_invalid_env_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOLLOWNET_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            LoggingSettings()
