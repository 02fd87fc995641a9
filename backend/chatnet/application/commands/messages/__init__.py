"""Message commands."""

from .send_message_to_chat import SendMessageToChatCommand, SendMessageToChatHandler
from .delete_message import DeleteMessageCommand, DeleteMessageHandler

__all__ = [
    "SendMessageToChatCommand",
    "SendMessageToChatHandler",
    "DeleteMessageCommand",
    "DeleteMessageHandler",
]
