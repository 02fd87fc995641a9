"""
MessageId Value Object - identifier of a chat message.
"""

from dataclasses import dataclass
from typing import ClassVar

from chatnet.domain.value_objects.entity_ref import EntityRef


@dataclass(frozen=True)
class MessageId(EntityRef):
    entity_type: ClassVar[str] = "Message"
