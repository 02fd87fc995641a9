"""
EntityRef Value Object - typed identifier used as a relationship.

A reference is an (entity type, id) pair. Subclasses fix the entity type,
so two references are equal only when both type and id match. The ledger
platform writes relationships as ``resource:<namespace>.<Type>#<id>``;
``parse`` accepts that form as well as a bare id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeVar

RESOURCE_SCHEME = "resource:"

R = TypeVar("R", bound="EntityRef")


@dataclass(frozen=True)
class EntityRef:
    entity_type: ClassVar[str] = ""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError(f"{self.entity_type} id cannot be empty")

    @classmethod
    def parse(cls: type[R], raw: str) -> R:
        """Build a reference from a bare id or a ``resource:`` URI."""
        if not raw.startswith(RESOURCE_SCHEME):
            return cls(raw)

        qualified, sep, identifier = raw[len(RESOURCE_SCHEME):].partition("#")
        if not sep:
            raise ValueError(f"Malformed resource reference: {raw}")
        type_name = qualified.rsplit(".", 1)[-1]
        if type_name != cls.entity_type:
            raise ValueError(
                f"Expected a {cls.entity_type} reference, got {type_name}: {raw}"
            )
        return cls(identifier)

    def to_uri(self, namespace: str) -> str:
        return f"{RESOURCE_SCHEME}{namespace}.{self.entity_type}#{self.value}"

    def __str__(self) -> str:
        return self.value
