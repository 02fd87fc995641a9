"""
Status changes on an existing member.

The status lives on the Member record, so the member is what gets
written; the chat keeps referring to it unchanged. Re-applying the status
a member already has writes nothing and emits nothing.
"""

import logging
from typing import Callable

from chatnet.application.common.transaction_context import TransactionContext
from chatnet.domain.entities import Chat, Member
from chatnet.domain.events import MemberStatusChanged
from chatnet.domain.exceptions import EntityNotFoundError
from chatnet.domain.services import membership_policy
from chatnet.domain.value_objects import ChatId, MemberId

logger = logging.getLogger(__name__)


async def load_chat_member(
    context: TransactionContext, chat_id: ChatId, member_id: MemberId
) -> tuple[Chat, Member]:
    chat = await context.uow.chats.get(chat_id)
    if not chat.has_member(member_id):
        raise EntityNotFoundError(
            f"Member {member_id.value} does not belong to chat {chat_id.value}"
        )
    return chat, await context.uow.members.get(member_id)


async def apply_status(
    context: TransactionContext,
    chat: Chat,
    member: Member,
    transition: Callable[[Member], bool],
) -> Member:
    previous = member.status
    if not transition(member):
        logger.debug(
            f"[Membership] member {member.id.value} already {member.status.value}"
        )
        return member

    await context.uow.members.update(member)
    context.uow.emit(
        MemberStatusChanged(
            chat=chat.id,
            member=member.id,
            previous_status=previous,
            status=member.status,
        )
    )
    logger.info(
        f"[Membership] member {member.id.value} in chat {chat.id.value}: "
        f"{previous.value} -> {member.status.value}"
    )
    return member


async def sanction(
    context: TransactionContext,
    chat_id: ChatId,
    member_id: MemberId,
    transition: Callable[[Member], bool],
) -> Member:
    """Expel or block: an active owner acts on a non-owner member."""
    caller = await context.caller()
    chat, member = await load_chat_member(context, chat_id, member_id)
    membership_policy.ensure_can_administer(chat, caller, await context.members_of(chat))
    membership_policy.ensure_can_sanction(member)
    return await apply_status(context, chat, member, transition)
