from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from config.settings import Settings, get_settings
from relay.core.messages import Message, history_from_payload, to_wire
from relay.core.prompt import system_message
from relay.errors import ConfigurationError, InvalidRequest, RelayError
from relay.gateway import GatewayClient


logger = logging.getLogger("nutriguide.relay")


def build_payload(history: Sequence[Message], model: str) -> Dict[str, Any]:
    """Outbound body: the fixed system turn followed by ``history`` as given."""
    messages: List[Message] = [system_message(), *history]
    return {"model": model, "messages": to_wire(messages)}


def build_gateway(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> GatewayClient:
    settings = settings or get_settings()
    if not settings.api_key:
        logger.error("LOVABLE_API_KEY is not configured")
        raise ConfigurationError()
    return GatewayClient(settings, transport=transport)


def relay_chat(
    history: Any,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    """Forward one conversation to the AI gateway and return the reply text.

    Raises a RelayError subclass on every failure. The shape check and the
    credential check both happen before any upstream call.
    """
    settings = settings or get_settings()
    try:
        messages = history_from_payload(history)
    except InvalidRequest as exc:
        logger.warning("Rejected conversation: %s", exc.detail or exc.message)
        raise

    gateway = build_gateway(settings, transport=transport)
    logger.info(
        "Calling AI Gateway with %s messages (model=%s)",
        len(messages),
        settings.chat_model,
    )
    try:
        reply = gateway.complete(build_payload(messages, settings.chat_model))
    except RelayError as exc:
        logger.warning("Relay failed: kind=%s status=%s", exc.kind, exc.status_code)
        raise

    logger.info("Successfully generated response: %s chars", len(reply))
    return reply
