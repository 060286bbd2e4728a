"""Tests for conversation message validation."""

from __future__ import annotations

import pytest

from relay.core.messages import Message, Role, history_from_payload, to_wire
from relay.core.prompt import SYSTEM_PROMPT, system_message
from relay.errors import InvalidRequest


def test_accepts_dicts_and_messages() -> None:
    history = history_from_payload(
        [
            {"role": "user", "content": "Classify nutraceuticals"},
            Message(role=Role.ASSISTANT, content=""),
        ]
    )
    assert [m.role for m in history] == [Role.USER, Role.ASSISTANT]
    assert to_wire(history) == [
        {"role": "user", "content": "Classify nutraceuticals"},
        {"role": "assistant", "content": ""},
    ]


def test_accepts_tuple() -> None:
    assert len(history_from_payload(({"role": "user", "content": "hi"},))) == 1


@pytest.mark.parametrize("items", [b"bytes", 3, [None]])
def test_rejects_bad_shapes(items) -> None:
    with pytest.raises(InvalidRequest):
        history_from_payload(items)


def test_system_message_is_fixed_prompt() -> None:
    message = system_message()
    assert message.role is Role.SYSTEM
    assert message.content == SYSTEM_PROMPT
    assert "Never provide a medical diagnosis" in SYSTEM_PROMPT
