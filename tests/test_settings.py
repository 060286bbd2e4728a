"""Tests for environment-driven settings."""

from __future__ import annotations

from config.settings import DEFAULT_CHAT_MODEL, DEFAULT_GATEWAY_URL, Settings


def test_defaults(monkeypatch) -> None:
    for name in ("LOVABLE_API_KEY", "AI_GATEWAY_URL", "CHAT_MODEL", "UPSTREAM_TIMEOUT_SECONDS", "RELAY_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.api_key is None
    assert settings.gateway_url == DEFAULT_GATEWAY_URL
    assert settings.chat_model == DEFAULT_CHAT_MODEL
    assert settings.upstream_timeout == 60.0
    assert settings.relay_timeout == 90.0


def test_blank_key_counts_as_missing(make_settings) -> None:
    assert make_settings(api_key="").api_key is None


def test_overrides(make_settings) -> None:
    settings = make_settings(UPSTREAM_TIMEOUT_SECONDS="30", RELAY_TIMEOUT_SECONDS="45", LOG_LEVEL="debug")
    assert settings.api_key == "test-key"
    assert settings.chat_model == "test/model"
    assert settings.upstream_timeout == 30.0
    assert settings.relay_timeout == 45.0
    assert settings.log_level == "DEBUG"
