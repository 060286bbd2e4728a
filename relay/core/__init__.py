from relay.core.messages import Message, Role, history_from_payload, to_wire
from relay.core.prompt import SYSTEM_PROMPT, system_message

__all__ = [
    "Message",
    "Role",
    "SYSTEM_PROMPT",
    "history_from_payload",
    "system_message",
    "to_wire",
]
