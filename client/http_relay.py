from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from config.settings import get_settings
from relay.core.messages import Message, to_wire
from relay.errors import EmptyResponse, NetworkError, UpstreamTimeout, error_for_status


logger = logging.getLogger("nutriguide.client")


class HttpRelay:
    """Callable relay backend that talks to the relay service over HTTP."""

    def __init__(
        self,
        url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout if timeout is not None else get_settings().relay_timeout
        self._transport = transport

    def __call__(self, history: List[Message]) -> str:
        payload = {"messages": to_wire(history)}
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(self.url, json=payload)
        except httpx.TimeoutException as exc:
            raise UpstreamTimeout(detail=str(exc)) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(detail=str(exc)) from exc

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.status_code != 200:
            message = data.get("error") if isinstance(data.get("error"), str) else None
            logger.debug("Relay responded %s: %s", response.status_code, message)
            raise error_for_status(response.status_code, message)

        reply = data.get("response")
        if not isinstance(reply, str) or not reply:
            raise EmptyResponse(detail="relay response has no 'response' text")
        return reply
