"""Tests for core.settings."""
from core.settings import DEFAULT_AGENT_MODEL, DEFAULT_TIMEOUT_SECONDS, load_settings


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings.api_key is None
        assert settings.timeout == DEFAULT_TIMEOUT_SECONDS
        assert settings.transport == "stdio"
        assert settings.port == 8000
        assert settings.agent_model == DEFAULT_AGENT_MODEL

    def test_blank_key_is_missing(self, monkeypatch):
        monkeypatch.setenv("DUST_API_KEY", "   ")
        assert load_settings().api_key is None

    def test_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("DUST_API_KEY", " abc%3D%3D ")
        monkeypatch.setenv("DUST_API_TIMEOUT", "2.5")
        monkeypatch.setenv("MCP_TRANSPORT", "sse")
        monkeypatch.setenv("MCP_PORT", "9000")
        settings = load_settings()
        assert settings.api_key == "abc%3D%3D"
        assert settings.timeout == 2.5
        assert settings.transport == "sse"
        assert settings.port == 9000

    def test_invalid_numbers_fall_back(self, monkeypatch):
        monkeypatch.setenv("DUST_API_TIMEOUT", "ten")
        monkeypatch.setenv("MCP_PORT", "eighty")
        settings = load_settings()
        assert settings.timeout == DEFAULT_TIMEOUT_SECONDS
        assert settings.port == 8000

    def test_non_positive_timeout_falls_back(self, monkeypatch):
        monkeypatch.setenv("DUST_API_TIMEOUT", "0")
        assert load_settings().timeout == DEFAULT_TIMEOUT_SECONDS
