from pathlib import Path

from agentdesk.core.config.settings import Settings


def test_api_url_normalises_slashes():
    settings = Settings(API_BASE_URL="https://api.example.com/v1/")
    assert settings.api_url("/agent/orders") == "https://api.example.com/v1/agent/orders"
    assert settings.api_url("wallets") == "https://api.example.com/v1/wallets"


def test_timeouts_default_to_light_and_heavy_classes():
    settings = Settings()
    assert settings.LIGHT_READ_TIMEOUT_SECONDS == 30
    assert settings.HEAVY_TIMEOUT_SECONDS == 60
    assert settings.REFRESH_TIMEOUT_SECONDS == 60


def test_allowed_origins_accept_comma_list():
    settings = Settings(ALLOWED_ORIGINS="http://a.test, http://b.test")
    assert settings.ALLOWED_ORIGINS == ["http://a.test", "http://b.test"]


def test_session_file_is_expanded():
    settings = Settings(SESSION_FILE="~/agentdesk-session.json")
    assert settings.SESSION_FILE == Path.home() / "agentdesk-session.json"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "http://staging-backend:9000")
    monkeypatch.setenv("LIGHT_READ_TIMEOUT_SECONDS", "12.5")
    settings = Settings()
    assert settings.API_BASE_URL == "http://staging-backend:9000"
    assert settings.LIGHT_READ_TIMEOUT_SECONDS == 12.5
