"""
Send Message To Chat Command.

The message record is written in the same transaction that appends it to
the chat. A message that is already in the registry (registered ahead of
the transaction by the platform) is referenced as is, as long as no chat
holds it yet. Content is only accepted for a new message.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from chatnet.application.commands.messages.ownership import find_holding_chat
from chatnet.application.common.interfaces import Command, CommandHandler
from chatnet.application.common.transaction_context import TransactionContext
from chatnet.domain.entities import Message
from chatnet.domain.events import MessageSent
from chatnet.domain.exceptions import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidStateError,
)
from chatnet.domain.value_objects import ChatId, MessageId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageToChatCommand(Command[MessageId]):
    chat: ChatId
    content: Optional[str] = None
    message_id: Optional[MessageId] = None


class SendMessageToChatHandler(CommandHandler[MessageId]):
    def __init__(self, context: TransactionContext):
        self._context = context

    async def execute(self, command: SendMessageToChatCommand) -> MessageId:
        caller = await self._context.caller()
        chat = await self._context.uow.chats.get(command.chat)

        messages = self._context.uow.messages
        if command.message_id and await messages.exists(command.message_id):
            holder = await find_holding_chat(self._context.uow, command.message_id)
            if holder is not None:
                raise InvalidStateError(
                    f"Message {command.message_id.value} already belongs to chat {holder.id.value}"
                )
            if command.content is not None:
                raise EntityAlreadyExistsError(
                    f"Message {command.message_id.value} already exists; send it by reference"
                )
            message = await messages.get(command.message_id)
        elif command.content is None:
            raise EntityNotFoundError(f"Message {command.message_id} not found")
        else:
            message = Message.create(
                owner=caller,
                content=command.content,
                message_id=command.message_id.value if command.message_id else None,
                id_factory=self._context.id_factory,
            )
            await messages.add(message)

        chat.append_message(message.id)
        await self._context.uow.chats.update(chat)

        self._context.uow.emit(
            MessageSent(chat=chat.id, message=message.id, owner=message.owner)
        )
        logger.info(
            f"[Message] {message.id.value} sent to chat {chat.id.value} "
            f"({len(chat.message_list)} message(s))"
        )
        return message.id
