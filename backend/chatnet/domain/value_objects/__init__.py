"""
VALUE OBJECTS - Immutable domain types

Each identifier value object doubles as a typed relationship:
- Is immutable (frozen dataclass)
- Compares by (entity type, id)
- Validates itself on creation
"""

from chatnet.domain.value_objects.entity_ref import EntityRef
from chatnet.domain.value_objects.user_id import UserId
from chatnet.domain.value_objects.member_id import MemberId
from chatnet.domain.value_objects.message_id import MessageId
from chatnet.domain.value_objects.chat_id import ChatId
from chatnet.domain.value_objects.chat_network_id import ChatNetworkId
from chatnet.domain.value_objects.enums import ChatType, MemberStatus, MemberType

__all__ = [
    "EntityRef",
    "UserId",
    "MemberId",
    "MessageId",
    "ChatId",
    "ChatNetworkId",
    "ChatType",
    "MemberStatus",
    "MemberType",
]
