from client.conversation import ConversationClient, Notification
from client.http_relay import HttpRelay

__all__ = ["ConversationClient", "HttpRelay", "Notification"]
