"""
Start New Peer Chat Command.

A peer chat has exactly two members, fixed at creation: the caller as
OWNER and the invited peer as NORMAL, both with status NORMAL.
"""

from dataclasses import dataclass
from typing import Optional

from chatnet.application.commands.chats.chat_factory import (
    ensure_chat_id_free,
    new_member,
    open_chat,
)
from chatnet.application.common.interfaces import Command, CommandHandler
from chatnet.application.common.transaction_context import TransactionContext
from chatnet.domain.entities import Chat
from chatnet.domain.exceptions import DomainValidationError, EntityNotFoundError
from chatnet.domain.value_objects import (
    ChatId,
    ChatNetworkId,
    ChatType,
    MemberType,
    UserId,
)


@dataclass(frozen=True)
class StartNewPeerChatCommand(Command[ChatId]):
    new_chat_id: ChatId
    new_chat_title: str
    peer_user: UserId
    chat_net: Optional[ChatNetworkId] = None


class StartNewPeerChatHandler(CommandHandler[ChatId]):
    def __init__(self, context: TransactionContext, network_id: ChatNetworkId):
        self._context = context
        self._network_id = network_id

    async def execute(self, command: StartNewPeerChatCommand) -> ChatId:
        caller = await self._context.caller()
        if command.peer_user == caller:
            raise DomainValidationError("A peer chat needs two different users")
        if not await self._context.uow.users.exists(command.peer_user):
            raise EntityNotFoundError(f"User {command.peer_user.value} not found")
        await ensure_chat_id_free(self._context, command.new_chat_id)

        chat = Chat.create(command.new_chat_id, command.new_chat_title, ChatType.PEER)
        owner = new_member(self._context, chat, caller, MemberType.OWNER)
        peer = new_member(self._context, chat, command.peer_user, MemberType.NORMAL)

        await open_chat(
            self._context,
            command.chat_net or self._network_id,
            chat=chat,
            creator=caller,
            members=[owner, peer],
        )
        return chat.id
