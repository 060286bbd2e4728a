from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError

from relay.errors import InvalidRequest


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class Message(BaseModel):
    """One role-tagged turn of a conversation. Position is its only identity."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="'user', 'assistant' or 'system'")
    content: StrictStr


# Roles a caller may send; the system turn is only ever added by the relay.
CALLER_ROLES = {Role.USER, Role.ASSISTANT}

_HISTORY_ADAPTER = TypeAdapter(List[Message])


def history_from_payload(items: Any) -> List[Message]:
    """Validate a caller-supplied conversation and return it as messages.

    Raises InvalidRequest when ``items`` is not a list of ``{role, content}``
    objects with a caller role and string content.
    """
    if items is None or isinstance(items, (str, bytes, dict)) or not isinstance(items, Sequence):
        raise InvalidRequest()
    try:
        history = _HISTORY_ADAPTER.validate_python(
            [m.model_dump() if isinstance(m, Message) else m for m in items]
        )
    except ValidationError as exc:
        raise InvalidRequest(detail=str(exc)) from exc

    for message in history:
        if message.role not in CALLER_ROLES:
            raise InvalidRequest(detail=f"role '{message.role.value}' is not allowed from callers")
    return history


def to_wire(messages: Sequence[Message]) -> List[Dict[str, str]]:
    return [{"role": m.role.value, "content": m.content} for m in messages]
