"""
Chat Entity - Root aggregate of a conversation.

The chat keeps ordered references to its members (join order) and
messages (send order). The referenced records live in their own
registries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from chatnet.domain.exceptions import InvalidStateError
from chatnet.domain.services.sequences import remove_element
from chatnet.domain.value_objects import ChatId, ChatType, MemberId, MessageId


@dataclass
class Chat:
    id: ChatId
    title: str
    create_at: datetime
    type: ChatType
    member_list: list[MemberId] = field(default_factory=list)
    message_list: list[MessageId] = field(default_factory=list)

    @classmethod
    def create(cls, chat_id: ChatId, title: str, chat_type: ChatType) -> Chat:
        return cls(
            id=chat_id,
            title=title,
            create_at=datetime.now(timezone.utc),
            type=chat_type,
        )

    def has_member(self, member_id: MemberId) -> bool:
        return member_id in self.member_list

    def add_member(self, member_id: MemberId) -> None:
        if member_id in self.member_list:
            raise InvalidStateError(f"Member {member_id} is already in chat {self.id}")
        self.member_list.append(member_id)

    def append_message(self, message_id: MessageId) -> None:
        if message_id in self.message_list:
            raise InvalidStateError(
                f"Message {message_id} was already sent to chat {self.id}"
            )
        self.message_list.append(message_id)

    def remove_message(self, message_id: MessageId) -> None:
        remove_element(self.message_list, message_id)
