from relay.errors import RelayError
from relay.service import build_payload, relay_chat

__all__ = ["RelayError", "build_payload", "relay_chat"]
