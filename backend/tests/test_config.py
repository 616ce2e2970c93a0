"""Tests for service settings."""
from linklink.config import Settings, get_settings


class TestSettings:
    """Test cases for Settings."""

    def test_cors_origins_split(self):
        settings = Settings(cors_origins=" http://a.test ,http://b.test,, ")

        assert settings.get_cors_origins() == ["http://a.test", "http://b.test"]

    def test_cors_origins_empty(self):
        assert Settings(cors_origins="").get_cors_origins() == []

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SHUFFLE_MAX_ATTEMPTS", "5")

        assert Settings().shuffle_max_attempts == 5

    def test_get_settings_cached(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "false")

        assert get_settings() is get_settings()
