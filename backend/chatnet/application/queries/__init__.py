"""Read-only chat queries."""

from chatnet.application.queries.get_chat import ChatView, GetChatHandler, GetChatQuery
from chatnet.application.queries.list_network_chats import (
    ListNetworkChatsHandler,
    ListNetworkChatsQuery,
)

__all__ = [
    "ChatView",
    "GetChatQuery",
    "GetChatHandler",
    "ListNetworkChatsQuery",
    "ListNetworkChatsHandler",
]
