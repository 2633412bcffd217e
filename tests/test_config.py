"""Tests for Pydantic Settings configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from either.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings should have sensible defaults."""
        for key in ("EITHER_LOG_LEVEL", "EITHER_JSON_LOGS"):
            monkeypatch.delenv(key, raising=False)

        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.json_logs is False

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """EITHER_* variables should populate settings."""
        monkeypatch.setenv("EITHER_LOG_LEVEL", "warning")
        monkeypatch.setenv("EITHER_JSON_LOGS", "true")

        settings = Settings()

        assert settings.log_level == "WARNING"
        assert settings.json_logs is True

    def test_unprefixed_variables_are_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Variables without the prefix should not leak in."""
        monkeypatch.delenv("EITHER_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert Settings().log_level == "INFO"

    def test_invalid_log_level_rejected(self) -> None:
        """Unknown log levels should fail validation."""
        with pytest.raises(ValidationError, match="log_level"):
            Settings(log_level="LOUD")

    def test_only_logging_fields(self) -> None:
        """Settings should only carry the logging options it is used for."""
        assert set(Settings.model_fields) == {"log_level", "json_logs"}


class TestGetSettings:
    """Tests for get_settings function."""

    def test_get_settings_returns_settings(self) -> None:
        """get_settings should return Settings instance."""
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_cached(self) -> None:
        """get_settings should return cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2
