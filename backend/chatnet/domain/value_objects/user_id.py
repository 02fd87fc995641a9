"""
UserId Value Object - email-like key identifying a participant.
"""

from dataclasses import dataclass
from typing import ClassVar

from chatnet.domain.value_objects.entity_ref import EntityRef


@dataclass(frozen=True)
class UserId(EntityRef):
    entity_type: ClassVar[str] = "User"

    def __post_init__(self):
        super().__post_init__()
        if "@" not in self.value:
            raise ValueError(f"Invalid user id (email expected): {self.value}")
