"""Tests for environment-driven settings."""

from ntfy_adapter.config import Settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("NTFY_REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("NTFY_USER_AGENT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.request_timeout == 10.0
    assert settings.user_agent.startswith("ntfy-adapter/")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("NTFY_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("NTFY_USER_AGENT", "custom/1.0")

    settings = Settings(_env_file=None)

    assert settings.request_timeout == 2.5
    assert settings.user_agent == "custom/1.0"
