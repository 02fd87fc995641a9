"""Enumerated attributes of members and chats."""

from enum import Enum


class MemberType(str, Enum):
    OWNER = "OWNER"
    NORMAL = "NORMAL"


class MemberStatus(str, Enum):
    """Lifecycle of a membership record."""

    NORMAL = "NORMAL"
    REQUESTED = "REQUESTED"
    EXPELLED = "EXPELLED"
    BLOCKED = "BLOCKED"
    LEFT = "LEFT"

    @property
    def is_active(self) -> bool:
        return self in (MemberStatus.NORMAL, MemberStatus.REQUESTED)


class ChatType(str, Enum):
    """Visibility type of a chat."""

    PEER = "PEER"
    PUBLIC_GROUP = "PUBLIC_GROUP"
    PRIVATE_GROUP = "PRIVATE_GROUP"
    PUBLIC_CHANNEL = "PUBLIC_CHANNEL"
    PRIVATE_CHANNEL = "PRIVATE_CHANNEL"

    @property
    def is_public(self) -> bool:
        return self in (ChatType.PUBLIC_GROUP, ChatType.PUBLIC_CHANNEL)

    @property
    def is_private(self) -> bool:
        return self in (ChatType.PRIVATE_GROUP, ChatType.PRIVATE_CHANNEL)
