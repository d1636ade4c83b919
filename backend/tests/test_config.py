"""Settings: environment parsing and caching."""

from cloud_mock.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.mock_enabled is True
    assert settings.api_key_prefix == "essu_"
    assert settings.port == 8080


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MOCK_ENABLED", "false")
    monkeypatch.setenv("PORT", "9999")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:3000"]')
    settings = Settings(_env_file=None)
    assert settings.mock_enabled is False
    assert settings.port == 9999
    assert settings.cors_origins == ["http://localhost:3000"]


def test_upstream_url_trailing_slash_stripped():
    assert Settings(upstream_url="https://x.example/").upstream_url == "https://x.example"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
