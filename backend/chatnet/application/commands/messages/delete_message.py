"""
Delete Message Command.

The reference is dropped from the chat's list (no-op if it is not there)
and the message record itself is removed. The record must exist, and a
message held by a different chat is left alone.
"""

import logging
from dataclasses import dataclass

from chatnet.application.commands.messages.ownership import find_holding_chat
from chatnet.application.common.interfaces import Command, CommandHandler
from chatnet.application.common.transaction_context import TransactionContext
from chatnet.domain.events import MessageDeleted
from chatnet.domain.exceptions import InvalidStateError
from chatnet.domain.value_objects import ChatId, MessageId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteMessageCommand(Command[bool]):
    chat: ChatId
    message: MessageId


class DeleteMessageHandler(CommandHandler[bool]):
    def __init__(self, context: TransactionContext):
        self._context = context

    async def execute(self, command: DeleteMessageCommand) -> bool:
        await self._context.caller()
        chat = await self._context.uow.chats.get(command.chat)

        holder = await find_holding_chat(self._context.uow, command.message)
        if holder is not None and holder.id != chat.id:
            raise InvalidStateError(
                f"Message {command.message.value} belongs to chat {holder.id.value}, "
                f"not {chat.id.value}"
            )

        chat.remove_message(command.message)
        await self._context.uow.chats.update(chat)
        await self._context.uow.messages.remove(command.message)
        self._context.uow.emit(MessageDeleted(chat=chat.id, message=command.message))
        logger.info(f"[Message] {command.message.value} deleted from chat {chat.id.value}")
        return True
