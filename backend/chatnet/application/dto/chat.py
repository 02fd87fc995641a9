"""Chat DTOs for presenting query results."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from chatnet.application.queries.get_chat import ChatView
from chatnet.config.settings import Config
from chatnet.domain.value_objects import ChatType, MemberStatus, MemberType


class MemberDTO(BaseModel):
    id: str
    user: str
    type: MemberType
    status: MemberStatus
    added_at: datetime


class MessageDTO(BaseModel):
    id: str
    owner: str
    content: str
    create_at: datetime


class ChatDTO(BaseModel):
    id: str
    uri: str
    title: str
    type: ChatType
    create_at: datetime
    members: list[MemberDTO]
    messages: list[MessageDTO]

    @classmethod
    def from_view(cls, view: ChatView) -> ChatDTO:
        return cls(
            id=view.chat.id.value,
            uri=view.chat.id.to_uri(Config.CHAT_NAMESPACE),
            title=view.chat.title,
            type=view.chat.type,
            create_at=view.chat.create_at,
            members=[
                MemberDTO(
                    id=m.id.value,
                    user=m.user.value,
                    type=m.type,
                    status=m.status,
                    added_at=m.added_at,
                )
                for m in view.members
            ],
            messages=[
                MessageDTO(
                    id=m.id.value,
                    owner=m.owner.value,
                    content=m.content,
                    create_at=m.create_at,
                )
                for m in view.messages
            ],
        )
