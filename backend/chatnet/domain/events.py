"""
Domain events - notifications staged by handlers.

Events are published only after the ledger transaction that produced them
commits. Subscribers use them for notification; state never depends on
them.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar

from chatnet.domain.value_objects import (
    ChatId,
    ChatType,
    MemberId,
    MemberStatus,
    MessageId,
    UserId,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    name: ClassVar[str] = "DomainEvent"

    occurred_at: datetime = field(default_factory=_now, kw_only=True)

    def to_dict(self) -> dict[str, Any]:
        """Flatten the event to JSON-friendly primitives."""
        data: dict[str, Any] = {"event": self.name}
        for key, value in asdict(self).items():
            if isinstance(value, dict) and set(value) == {"value"}:
                data[key] = value["value"]
            elif isinstance(value, datetime):
                data[key] = value.isoformat()
            elif hasattr(value, "value"):
                data[key] = value.value
            else:
                data[key] = value
        return data


@dataclass(frozen=True)
class ChatCreated(DomainEvent):
    name: ClassVar[str] = "ChatCreated"

    chat: ChatId
    chat_type: ChatType
    creator: UserId


@dataclass(frozen=True)
class NewMemberCreated(DomainEvent):
    name: ClassVar[str] = "NewMemberCreated"

    chat: ChatId
    new_member: MemberId
    user: UserId
    status: MemberStatus


@dataclass(frozen=True)
class MemberStatusChanged(DomainEvent):
    name: ClassVar[str] = "MemberStatusChanged"

    chat: ChatId
    member: MemberId
    previous_status: MemberStatus
    status: MemberStatus


@dataclass(frozen=True)
class MessageSent(DomainEvent):
    name: ClassVar[str] = "MessageSent"

    chat: ChatId
    message: MessageId
    owner: UserId


@dataclass(frozen=True)
class MessageDeleted(DomainEvent):
    name: ClassVar[str] = "MessageDeleted"

    chat: ChatId
    message: MessageId
