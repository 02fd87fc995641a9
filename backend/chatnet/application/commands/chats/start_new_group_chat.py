"""Start New Group Chat Command."""

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
from chatnet.domain.exceptions import DomainValidationError
from chatnet.domain.value_objects import ChatId, ChatNetworkId, ChatType, MemberType


@dataclass(frozen=True)
class StartNewGroupChatCommand(Command[ChatId]):
    new_chat_id: ChatId
    new_chat_title: str
    type: ChatType
    chat_net: Optional[ChatNetworkId] = None


class StartNewGroupChatHandler(CommandHandler[ChatId]):
    def __init__(self, context: TransactionContext, network_id: ChatNetworkId):
        self._context = context
        self._network_id = network_id

    async def execute(self, command: StartNewGroupChatCommand) -> ChatId:
        if command.type is ChatType.PEER:
            raise DomainValidationError("Use StartNewPeerChat to open a peer chat")

        caller = await self._context.caller()
        await ensure_chat_id_free(self._context, command.new_chat_id)

        chat = Chat.create(command.new_chat_id, command.new_chat_title, command.type)
        owner = new_member(self._context, chat, caller, MemberType.OWNER)

        await open_chat(
            self._context,
            command.chat_net or self._network_id,
            chat=chat,
            creator=caller,
            members=[owner],
        )
        return chat.id
