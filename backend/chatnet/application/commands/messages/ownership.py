"""
Which chat holds a message.

A message belongs to at most one chat. The link lives only in
Chat.message_list, so the owner is found by looking through the chats.
"""

from typing import Optional

from chatnet.domain.entities import Chat
from chatnet.domain.ports import UnitOfWork
from chatnet.domain.value_objects import MessageId


async def find_holding_chat(uow: UnitOfWork, message_id: MessageId) -> Optional[Chat]:
    for chat in await uow.chats.get_all():
        if message_id in chat.message_list:
            return chat
    return None
