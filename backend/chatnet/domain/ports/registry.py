"""
Registry Port - keyed store for one entity type.
Implementations: chatnet/infrastructure/persistence/staged_registry.py
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from chatnet.domain.value_objects import EntityRef

E = TypeVar("E")
K = TypeVar("K", bound=EntityRef)


class Registry(ABC, Generic[K, E]):
    @abstractmethod
    async def get(self, entity_id: K) -> E:
        """Return the entity or raise EntityNotFoundError."""
        ...

    @abstractmethod
    async def exists(self, entity_id: K) -> bool: ...

    @abstractmethod
    async def get_all(self) -> list[E]: ...

    @abstractmethod
    async def add(self, entity: E) -> None:
        """Store a new entity or raise EntityAlreadyExistsError."""
        ...

    @abstractmethod
    async def update(self, entity: E) -> None:
        """Replace an existing entity or raise EntityNotFoundError."""
        ...

    @abstractmethod
    async def remove(self, entity_id: K) -> None:
        """Delete an existing entity or raise EntityNotFoundError."""
        ...
