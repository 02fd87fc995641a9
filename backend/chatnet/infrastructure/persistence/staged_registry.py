"""
Staged registry - Registry port over a backend snapshot plus pending writes.

Reads see the transaction's own writes first, then the backend. Writes
only touch the ChangeSet; the ledger applies the ChangeSet on commit.
Entities are copied on the way in and out, so a handler mutating an
object it read never changes stored state behind the ledger's back.
"""

import copy
from typing import Any, Awaitable, Callable, Generic, Iterator, Optional, TypeVar

from chatnet.domain.exceptions import EntityAlreadyExistsError, EntityNotFoundError
from chatnet.domain.ports import Registry
from chatnet.domain.value_objects import EntityRef

E = TypeVar("E")
K = TypeVar("K", bound=EntityRef)

DELETED = object()

Loader = Callable[[str, str], Awaitable[Optional[Any]]]
IdLister = Callable[[str], Awaitable[list[str]]]


class ChangeSet:
    """Ordered pending writes keyed by (entity type, id)."""

    def __init__(self):
        self._changes: dict[tuple[str, str], Any] = {}

    def stage(self, entity_type: str, entity_id: str, value: Any) -> None:
        self._changes.pop((entity_type, entity_id), None)
        self._changes[(entity_type, entity_id)] = value

    def lookup(self, entity_type: str, entity_id: str) -> tuple[bool, Any]:
        key = (entity_type, entity_id)
        if key in self._changes:
            return True, self._changes[key]
        return False, None

    def staged_ids(self, entity_type: str) -> list[str]:
        return [eid for (etype, eid) in self._changes if etype == entity_type]

    def items(self) -> Iterator[tuple[str, str, Any]]:
        for (entity_type, entity_id), value in self._changes.items():
            yield entity_type, entity_id, value

    def __len__(self) -> int:
        return len(self._changes)


class StagedRegistry(Registry[K, E], Generic[K, E]):
    def __init__(
        self,
        key_type: type[K],
        changes: ChangeSet,
        load: Loader,
        list_ids: IdLister,
    ):
        self._key_type = key_type
        self._entity_type = key_type.entity_type
        self._changes = changes
        self._load = load
        self._list_ids = list_ids

    async def _find(self, entity_id: str) -> Optional[E]:
        staged, value = self._changes.lookup(self._entity_type, entity_id)
        if staged:
            return None if value is DELETED else copy.deepcopy(value)
        return await self._load(self._entity_type, entity_id)

    async def get(self, entity_id: K) -> E:
        entity = await self._find(entity_id.value)
        if entity is None:
            raise EntityNotFoundError(f"{self._entity_type} {entity_id.value} not found")
        return entity

    async def exists(self, entity_id: K) -> bool:
        return await self._find(entity_id.value) is not None

    async def get_all(self) -> list[E]:
        ids = list(await self._list_ids(self._entity_type))
        ids += [i for i in self._changes.staged_ids(self._entity_type) if i not in ids]
        entities = []
        for entity_id in ids:
            entity = await self._find(entity_id)
            if entity is not None:
                entities.append(entity)
        return entities

    async def add(self, entity: E) -> None:
        entity_id = entity.id.value
        if await self._find(entity_id) is not None:
            raise EntityAlreadyExistsError(f"{self._entity_type} {entity_id} already exists")
        self._changes.stage(self._entity_type, entity_id, copy.deepcopy(entity))

    async def update(self, entity: E) -> None:
        entity_id = entity.id.value
        if await self._find(entity_id) is None:
            raise EntityNotFoundError(f"{self._entity_type} {entity_id} not found")
        self._changes.stage(self._entity_type, entity_id, copy.deepcopy(entity))

    async def remove(self, entity_id: K) -> None:
        if await self._find(entity_id.value) is None:
            raise EntityNotFoundError(f"{self._entity_type} {entity_id.value} not found")
        self._changes.stage(self._entity_type, entity_id.value, DELETED)
