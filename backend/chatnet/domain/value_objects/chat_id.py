"""
ChatId Value Object - caller-chosen chat identifier.
"""

from dataclasses import dataclass
from typing import ClassVar

from chatnet.domain.value_objects.entity_ref import EntityRef


@dataclass(frozen=True)
class ChatId(EntityRef):
    entity_type: ClassVar[str] = "Chat"
