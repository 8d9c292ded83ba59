"""Tests for application settings."""
import pytest

from config import Settings
from src.core import ConfigurationError


def _settings(**kwargs):
    return Settings(_env_file=None, **kwargs)


class TestResolveApiKey:
    """Test suite for Settings.resolve_api_key()."""

    def test_primary_key_wins(self):
        settings = _settings(openai_api_key="sk-primary", replit_openai_api_key="sk-fallback")
        assert settings.resolve_api_key() == "sk-primary"

    def test_fallback_key_is_used(self):
        settings = _settings(openai_api_key=None, replit_openai_api_key="sk-fallback")
        assert settings.resolve_api_key() == "sk-fallback"

    def test_blank_primary_falls_through(self):
        settings = _settings(openai_api_key="  ", replit_openai_api_key="sk-fallback")
        assert settings.resolve_api_key() == "sk-fallback"

    def test_missing_key_is_a_configuration_error(self):
        settings = _settings(openai_api_key=None, replit_openai_api_key=None)
        with pytest.raises(ConfigurationError):
            settings.resolve_api_key()

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "")
        monkeypatch.setenv("REPLIT_OPENAI_API_KEY", "sk-env")
        assert _settings().resolve_api_key() == "sk-env"

    def test_defaults(self):
        settings = _settings()
        assert settings.openai_model == "gpt-3.5-turbo"
        assert settings.provider_timeout_seconds == 60.0
        assert settings.client_timeout_seconds > settings.provider_timeout_seconds
