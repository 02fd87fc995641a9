"""
Leave Chat Command.

The caller's own membership is located by user, not passed in. A caller
with several records in one chat (left and later rejoined) leaves through
the active one.
"""

from dataclasses import dataclass

from chatnet.application.commands.membership.status_change import apply_status
from chatnet.application.common.interfaces import Command, CommandHandler
from chatnet.application.common.transaction_context import TransactionContext
from chatnet.domain.entities import Member
from chatnet.domain.exceptions import MembershipNotFoundError
from chatnet.domain.value_objects import ChatId, MemberId


@dataclass(frozen=True)
class LeaveChatCommand(Command[MemberId]):
    chat: ChatId


class LeaveChatHandler(CommandHandler[MemberId]):
    def __init__(self, context: TransactionContext):
        self._context = context

    async def execute(self, command: LeaveChatCommand) -> MemberId:
        caller = await self._context.caller()
        chat = await self._context.uow.chats.get(command.chat)

        own = [m for m in await self._context.members_of(chat) if m.user == caller]
        if not own:
            raise MembershipNotFoundError(chat.id.value, caller.value)

        # prefer the active record, else the latest one decides the outcome
        member = next((m for m in own if m.status.is_active), own[-1])
        await apply_status(self._context, chat, member, Member.leave)
        return member.id
