"""
GetChat Query - a chat with its member and message references resolved.
"""

from dataclasses import dataclass

from chatnet.application.common.interfaces import Query, QueryHandler
from chatnet.domain.entities import Chat, Member, Message
from chatnet.domain.ports import UnitOfWork
from chatnet.domain.value_objects import ChatId


@dataclass
class ChatView:
    """Chat plus dereferenced members (join order) and messages (send order)."""

    chat: Chat
    members: list[Member]
    messages: list[Message]


@dataclass(frozen=True)
class GetChatQuery(Query[ChatView]):
    chat: ChatId


class GetChatHandler(QueryHandler[ChatView]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, query: GetChatQuery) -> ChatView:
        """
        Raises:
            EntityNotFoundError: If the chat or a referenced record is missing
        """
        chat = await self._uow.chats.get(query.chat)
        members = [await self._uow.members.get(m) for m in chat.member_list]
        messages = [await self._uow.messages.get(m) for m in chat.message_list]
        return ChatView(chat=chat, members=members, messages=messages)
