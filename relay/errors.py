"""Error kinds raised by the relay and mapped to HTTP responses at the edge."""

from __future__ import annotations

from typing import Dict, Optional


class RelayError(Exception):
    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, *, detail: Optional[str] = None) -> None:
        self.message = message or self.default_message
        # Diagnostic text for logs only; never returned to the caller.
        self.detail = detail
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_payload(self) -> Dict[str, str]:
        return {"error": self.message}


class InvalidRequest(RelayError):
    status_code = 400
    default_message = "Invalid messages format"


class ConfigurationError(RelayError):
    status_code = 500
    default_message = "AI service is not configured"


class RateLimited(RelayError):
    status_code = 429
    default_message = "Rate limit exceeded. Please try again in a moment."


class QuotaExceeded(RelayError):
    status_code = 402
    default_message = "Service quota exceeded. Please contact support."


class EmptyResponse(RelayError):
    status_code = 502
    default_message = "No response from AI"


class MalformedResponse(EmptyResponse):
    default_message = "Malformed response from AI gateway"


class UpstreamError(RelayError):
    status_code = 502

    def __init__(
        self,
        upstream_status: Optional[int] = None,
        message: Optional[str] = None,
        *,
        detail: Optional[str] = None,
    ) -> None:
        self.upstream_status = upstream_status
        super().__init__(message or f"AI Gateway error: {upstream_status}", detail=detail)


class UpstreamTimeout(UpstreamError):
    status_code = 504

    def __init__(self, message: Optional[str] = None, *, detail: Optional[str] = None) -> None:
        super().__init__(None, message or "AI Gateway timed out", detail=detail)


class NetworkError(RelayError):
    status_code = 503
    default_message = "Could not reach the AI gateway"


class UnexpectedError(RelayError):
    status_code = 500


def error_for_status(status: int, message: Optional[str] = None) -> RelayError:
    """Rebuild the error kind behind a non-success relay response."""
    if status == RateLimited.status_code:
        return RateLimited(message)
    if status == QuotaExceeded.status_code:
        return QuotaExceeded(message)
    if status == InvalidRequest.status_code:
        return InvalidRequest(message)
    if status == UpstreamTimeout.status_code:
        return UpstreamTimeout(message)
    if status == NetworkError.status_code:
        return NetworkError(message)
    if status == 500 and message == ConfigurationError.default_message:
        return ConfigurationError(message)
    if status == EmptyResponse.status_code and message == MalformedResponse.default_message:
        return MalformedResponse(message)
    if status == EmptyResponse.status_code and message == EmptyResponse.default_message:
        return EmptyResponse(message)
    return UpstreamError(status, message)
