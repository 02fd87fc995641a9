"""Add Other User To Chat Command."""

from dataclasses import dataclass

from chatnet.application.commands.membership.enrollment import enroll
from chatnet.application.common.interfaces import Command, CommandHandler
from chatnet.application.common.transaction_context import TransactionContext
from chatnet.domain.exceptions import EntityNotFoundError
from chatnet.domain.services import membership_policy
from chatnet.domain.value_objects import ChatId, MemberId, UserId


@dataclass(frozen=True)
class AddOtherUserToChatCommand(Command[MemberId]):
    chat: ChatId
    other_user: UserId


class AddOtherUserToChatHandler(CommandHandler[MemberId]):
    def __init__(self, context: TransactionContext):
        self._context = context

    async def execute(self, command: AddOtherUserToChatCommand) -> MemberId:
        caller = await self._context.caller()
        chat = await self._context.uow.chats.get(command.chat)
        membership_policy.ensure_can_administer(
            chat, caller, await self._context.members_of(chat)
        )
        if not await self._context.uow.users.exists(command.other_user):
            raise EntityNotFoundError(f"User {command.other_user.value} not found")

        status = membership_policy.initial_added_status(chat)
        member = await enroll(self._context, chat, command.other_user, status)
        return member.id
