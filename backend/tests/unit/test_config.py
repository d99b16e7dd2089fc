"""Unit tests for application settings."""

import pytest

from ohshub.core.config import Settings


class TestSettings:
    """Tests for settings parsing and production validation."""

    def test_csv_lists_are_parsed(self):
        settings = Settings(cors_allow_origins="https://a.example, https://b.example")
        assert settings.cors_allow_origins == ["https://a.example", "https://b.example"]

    def test_docs_enabled_outside_production_by_default(self):
        assert Settings(environment="development").docs_enabled
        assert not Settings(environment="production").docs_enabled
        assert Settings(environment="production", api_docs_enabled=True).docs_enabled

    def test_wildcard_cors_rejected_in_production(self):
        with pytest.raises(ValueError):
            Settings(environment="production", cors_allow_origins="*")

    def test_wildcard_cors_allowed_in_development(self):
        assert Settings(environment="development", cors_allow_origins="*").cors_allow_origins == ["*"]

    def test_csv_lists_are_read_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CORS_ALLOW_METHODS", "GET, POST")
        monkeypatch.setenv("METRICS_TOKEN", "scrape-me")

        settings = Settings()

        assert settings.cors_allow_methods == ["GET", "POST"]
        assert settings.metrics_token == "scrape-me"
