"""
MemberId Value Object - generated UUID for a membership record.
"""

from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

from chatnet.domain.value_objects.entity_ref import EntityRef


@dataclass(frozen=True)
class MemberId(EntityRef):
    entity_type: ClassVar[str] = "Member"

    def __post_init__(self):
        super().__post_init__()
        UUID(self.value)  # raises ValueError if invalid UUID
