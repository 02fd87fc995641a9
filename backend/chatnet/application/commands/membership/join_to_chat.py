"""
Join To Chat Command.

Self-service join. The new member's status follows the chat type:
public chats admit immediately, private chats record a request.
"""

from dataclasses import dataclass

from chatnet.application.commands.membership.enrollment import enroll
from chatnet.application.common.interfaces import Command, CommandHandler
from chatnet.application.common.transaction_context import TransactionContext
from chatnet.domain.services import membership_policy
from chatnet.domain.value_objects import ChatId, MemberId


@dataclass(frozen=True)
class JoinToChatCommand(Command[MemberId]):
    chat: ChatId


class JoinToChatHandler(CommandHandler[MemberId]):
    def __init__(self, context: TransactionContext):
        self._context = context

    async def execute(self, command: JoinToChatCommand) -> MemberId:
        caller = await self._context.caller()
        chat = await self._context.uow.chats.get(command.chat)
        status = membership_policy.initial_join_status(chat)

        member = await enroll(self._context, chat, caller, status)
        return member.id
