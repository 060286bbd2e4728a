from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import count
from typing import Callable, List, Optional

from relay.core.messages import Message, Role
from relay.errors import RelayError


logger = logging.getLogger("nutriguide.client")

FAILURE_TEXT = "Failed to get response. Please try again."

RelayFn = Callable[[List[Message]], str]
Listener = Callable[["ConversationClient"], None]

_notification_ids = count(1)

LEVEL_ICONS = {"error": "⚠️", "info": "ℹ️"}


@dataclass(frozen=True)
class Notification:
    text: str
    level: str = "error"
    id: int = field(default_factory=lambda: next(_notification_ids))

    @property
    def icon(self) -> str:
        return LEVEL_ICONS.get(self.level, LEVEL_ICONS["error"])


class ConversationClient:
    """In-memory state for one chat session.

    ``history`` is append-only and ``pending`` guards against overlapping
    turns. Listeners are called after every state change so a presentation
    layer can redraw.
    """

    def __init__(self, relay: RelayFn) -> None:
        self._relay = relay
        self.history: List[Message] = []
        self.pending: bool = False
        self.draft: str = ""
        self.notifications: List[Notification] = []
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def submit(self, text: Optional[str] = None) -> bool:
        """Send one user turn. Returns False when the turn was ignored."""
        if text is None:
            text = self.draft
        if not text or not text.strip() or self.pending:
            return False

        self.history.append(Message(role=Role.USER, content=text))
        self.pending = True
        self.draft = ""
        self._notify()

        try:
            reply = self._relay(list(self.history))
        except RelayError as exc:
            logger.error("Relay call failed: kind=%s status=%s %s", exc.kind, exc.status_code, exc.message)
            self._push_failure()
        except Exception:
            logger.exception("Relay call failed unexpectedly")
            self._push_failure()
        else:
            self.history.append(Message(role=Role.ASSISTANT, content=reply))
        finally:
            self.pending = False
            self._notify()
        return True

    def _push_failure(self) -> None:
        self.notifications.append(Notification(text=FAILURE_TEXT))

    def dismiss(self, notification: Notification) -> None:
        self.notifications = [n for n in self.notifications if n.id != notification.id]
        self._notify()

    def clear_notifications(self) -> None:
        self.notifications = []
        self._notify()

    def reset(self) -> None:
        if self.pending:
            return
        self.history = []
        self.notifications = []
        self.draft = ""
        self._notify()
