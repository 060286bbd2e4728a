from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from config.settings import Settings
from relay.errors import (
    EmptyResponse,
    MalformedResponse,
    NetworkError,
    QuotaExceeded,
    RateLimited,
    UpstreamError,
    UpstreamTimeout,
)


logger = logging.getLogger("nutriguide.gateway")

MAX_LOGGED_BODY = 500


def _clean_body(text: str) -> str:
    return " ".join(str(text).split())[:MAX_LOGGED_BODY]


def _extract_reply(data: Any) -> str:
    if not isinstance(data, dict) or not isinstance(data.get("choices"), list):
        raise MalformedResponse(detail="response has no 'choices' list")
    choices = data["choices"]
    if not choices:
        raise EmptyResponse(detail="response has an empty 'choices' list")

    first = choices[0] if isinstance(choices[0], dict) else {}
    message = first.get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str) or not content.strip():
        raise EmptyResponse(detail="first choice has no message content")
    return content


class GatewayClient:
    """Thin client for an OpenAI-compatible chat-completion endpoint.

    Every call to :meth:`complete` is one independent upstream request: no
    retries, no caching.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._settings = settings
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.api_key}",
            "Content-Type": "application/json",
        }

    def complete(self, payload: Dict[str, Any]) -> str:
        settings = self._settings
        try:
            with httpx.Client(timeout=settings.upstream_timeout, transport=self._transport) as client:
                response = client.post(settings.gateway_url, json=payload, headers=self._headers())
        except httpx.TimeoutException as exc:
            logger.error("AI Gateway timed out after %ss", settings.upstream_timeout)
            raise UpstreamTimeout(detail=str(exc)) from exc
        except httpx.HTTPError as exc:
            logger.error("AI Gateway unreachable: %s", exc.__class__.__name__)
            raise NetworkError(detail=str(exc)) from exc

        if response.status_code == RateLimited.status_code:
            logger.warning("AI Gateway rate limited the request: %s", _clean_body(response.text))
            raise RateLimited()
        if response.status_code == QuotaExceeded.status_code:
            logger.error("AI Gateway quota exhausted: %s", _clean_body(response.text))
            raise QuotaExceeded()
        if not response.is_success:
            logger.error("AI Gateway error: %s %s", response.status_code, _clean_body(response.text))
            raise UpstreamError(response.status_code, detail=_clean_body(response.text))

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("AI Gateway returned invalid JSON: %s", _clean_body(response.text))
            raise MalformedResponse(detail=str(exc)) from exc

        try:
            return _extract_reply(data)
        except EmptyResponse as exc:
            logger.error("AI Gateway returned no usable reply: %s", exc.detail)
            raise
