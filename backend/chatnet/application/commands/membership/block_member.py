"""Block Member Command."""

from dataclasses import dataclass

from chatnet.application.commands.membership.status_change import sanction
from chatnet.application.common.interfaces import Command, CommandHandler
from chatnet.application.common.transaction_context import TransactionContext
from chatnet.domain.entities import Member
from chatnet.domain.value_objects import ChatId, MemberId, MemberStatus


@dataclass(frozen=True)
class BlockMemberCommand(Command[MemberStatus]):
    chat: ChatId
    member: MemberId


class BlockMemberHandler(CommandHandler[MemberStatus]):
    def __init__(self, context: TransactionContext):
        self._context = context

    async def execute(self, command: BlockMemberCommand) -> MemberStatus:
        member = await sanction(self._context, command.chat, command.member, Member.block)
        return member.status
