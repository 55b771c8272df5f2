"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from exante_md.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clean_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch):
        """Only the token is required; the rest has defaults."""
        monkeypatch.setenv("EXANTE_API_TOKEN", "env-token")
        settings = Settings(_env_file=None)

        assert settings.exante_api_token == "env-token"
        assert settings.exante_host == "https://api-demo.exante.eu"
        assert settings.exante_api_path == "/md/1.0"
        assert settings.exante_timeout_seconds is None
        assert settings.exante_strict_fields is True

    def test_env_overrides(self, monkeypatch):
        """Environment variables override every default."""
        monkeypatch.setenv("EXANTE_API_TOKEN", "env-token")
        monkeypatch.setenv("EXANTE_HOST", "https://api-live.exante.eu")
        monkeypatch.setenv("EXANTE_TIMEOUT_SECONDS", "7")
        monkeypatch.setenv("EXANTE_STRICT_FIELDS", "false")
        settings = Settings(_env_file=None)

        assert settings.exante_host == "https://api-live.exante.eu"
        assert settings.exante_timeout_seconds == 7.0
        assert settings.exante_strict_fields is False

    def test_token_required(self, monkeypatch):
        """Missing token fails validation."""
        monkeypatch.delenv("EXANTE_API_TOKEN", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_cached(self, monkeypatch):
        """get_settings returns one instance per process."""
        monkeypatch.setenv("EXANTE_API_TOKEN", "env-token")
        assert get_settings() is get_settings()
