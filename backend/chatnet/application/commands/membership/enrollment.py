"""Creating a member inside an existing chat."""

import logging

from chatnet.application.common.transaction_context import TransactionContext
from chatnet.domain.entities import Chat, Member
from chatnet.domain.events import NewMemberCreated
from chatnet.domain.services import membership_policy
from chatnet.domain.value_objects import MemberStatus, MemberType, UserId

logger = logging.getLogger(__name__)


async def enroll(
    context: TransactionContext, chat: Chat, user: UserId, status: MemberStatus
) -> Member:
    """Add a NORMAL-type member for ``user``, persisting member and chat."""
    membership_policy.ensure_can_enter(chat, user, await context.members_of(chat))

    member = Member.create(
        user=user,
        member_type=MemberType.NORMAL,
        status=status,
        id_factory=context.id_factory,
    )
    await context.uow.members.add(member)
    chat.add_member(member.id)
    await context.uow.chats.update(chat)

    context.uow.emit(
        NewMemberCreated(chat=chat.id, new_member=member.id, user=user, status=status)
    )
    logger.info(
        f"[Membership] {user.value} entered chat {chat.id.value} as {status.value}"
    )
    return member
