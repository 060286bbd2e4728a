from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()

DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"
DEFAULT_CHAT_MODEL = "google/gemini-2.5-flash"


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and config centralized here. Values are read when the
    object is built, so tests can construct one after patching the environment.
    """

    def __init__(self) -> None:
        self.app_env: str = os.getenv("APP_ENV", "development")
        self.api_key: Optional[str] = os.getenv("LOVABLE_API_KEY") or None
        self.gateway_url: str = os.getenv("AI_GATEWAY_URL", DEFAULT_GATEWAY_URL)
        self.chat_model: str = os.getenv("CHAT_MODEL", DEFAULT_CHAT_MODEL)
        self.upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "60"))
        self.relay_url: str = os.getenv(
            "RELAY_URL", "http://127.0.0.1:8000/nutriguide-chat"
        )
        self.relay_timeout: float = float(os.getenv("RELAY_TIMEOUT_SECONDS", "90"))
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
