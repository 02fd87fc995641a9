"""Chat creation commands."""

from .start_new_peer_chat import StartNewPeerChatCommand, StartNewPeerChatHandler
from .start_new_group_chat import StartNewGroupChatCommand, StartNewGroupChatHandler

__all__ = [
    "StartNewPeerChatCommand",
    "StartNewPeerChatHandler",
    "StartNewGroupChatCommand",
    "StartNewGroupChatHandler",
]
