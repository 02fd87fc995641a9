"""
Message Entity - A single message posted to a chat.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from chatnet.domain.services.identifiers import IdFactory, generate_uuid
from chatnet.domain.value_objects import MessageId, UserId


@dataclass
class Message:
    id: MessageId
    content: str
    create_at: datetime
    owner: UserId

    @classmethod
    def create(
        cls,
        owner: UserId,
        content: str,
        message_id: Optional[str] = None,
        id_factory: IdFactory = generate_uuid,
    ) -> Message:
        return cls(
            id=MessageId(message_id or id_factory()),
            content=content,
            create_at=datetime.now(timezone.utc),
            owner=owner,
        )
