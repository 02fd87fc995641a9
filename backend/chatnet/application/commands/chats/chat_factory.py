"""
Steps shared by the two "start new chat" handlers.

A new chat is written together with its initial members and appended to
the network singleton. All of it goes through the same UnitOfWork, so the
chat, its members and the network update commit as one.
"""

import logging

from chatnet.application.common.transaction_context import TransactionContext
from chatnet.domain.entities import Chat, Member
from chatnet.domain.events import ChatCreated, NewMemberCreated
from chatnet.domain.exceptions import EntityAlreadyExistsError
from chatnet.domain.value_objects import (
    ChatId,
    ChatNetworkId,
    MemberStatus,
    MemberType,
    UserId,
)

logger = logging.getLogger(__name__)


async def ensure_chat_id_free(context: TransactionContext, chat_id: ChatId) -> None:
    if await context.uow.chats.exists(chat_id):
        raise EntityAlreadyExistsError(f"Chat {chat_id.value} already exists")


def new_member(
    context: TransactionContext, chat: Chat, user: UserId, member_type: MemberType
) -> Member:
    member = Member.create(
        user=user,
        member_type=member_type,
        status=MemberStatus.NORMAL,
        id_factory=context.id_factory,
    )
    chat.add_member(member.id)
    return member


async def open_chat(
    context: TransactionContext,
    network_id: ChatNetworkId,
    chat: Chat,
    creator: UserId,
    members: list[Member],
) -> None:
    """Persist members, the chat and the network entry; stage events."""
    network = await context.uow.chat_networks.get(network_id)

    for member in members:
        await context.uow.members.add(member)
    await context.uow.chats.add(chat)

    network.register_chat(chat.id)
    await context.uow.chat_networks.update(network)

    context.uow.emit(ChatCreated(chat=chat.id, chat_type=chat.type, creator=creator))
    for member in members:
        context.uow.emit(
            NewMemberCreated(
                chat=chat.id,
                new_member=member.id,
                user=member.user,
                status=member.status,
            )
        )
    logger.info(
        f"[Chat] {chat.type.value} chat {chat.id.value} '{chat.title}' opened by "
        f"{creator.value} with {len(members)} member(s)"
    )
