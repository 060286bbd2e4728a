"""Shared test fixtures."""

from __future__ import annotations

from typing import Callable, Optional

import pytest

from config.settings import Settings
from tests.helpers import RecordingGateway, completion


@pytest.fixture
def make_settings(monkeypatch: pytest.MonkeyPatch) -> Callable[..., Settings]:
    """Build Settings from a patched environment."""

    def factory(api_key: Optional[str] = "test-key", **env: str) -> Settings:
        if api_key is None:
            monkeypatch.delenv("LOVABLE_API_KEY", raising=False)
        else:
            monkeypatch.setenv("LOVABLE_API_KEY", api_key)
        monkeypatch.setenv("AI_GATEWAY_URL", "https://gateway.test/v1/chat/completions")
        monkeypatch.setenv("CHAT_MODEL", "test/model")
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return Settings()

    return factory


@pytest.fixture
def settings(make_settings: Callable[..., Settings]) -> Settings:
    return make_settings()


@pytest.fixture
def gateway() -> RecordingGateway:
    return RecordingGateway(body=completion("A nutraceutical is..."))
