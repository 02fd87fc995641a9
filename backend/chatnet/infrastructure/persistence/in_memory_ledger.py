"""
In-memory Ledger - process-local store for tests and single-node use.

One asyncio.Lock is held for the whole transaction, so transactions run
one at a time in submission order.
"""

import asyncio
import copy
import logging
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from chatnet.domain.ports import Ledger
from chatnet.infrastructure.persistence.staged_registry import DELETED
from chatnet.infrastructure.persistence.staged_unit_of_work import StagedUnitOfWork

logger = logging.getLogger(__name__)


class InMemoryLedger(Ledger):
    def __init__(self):
        self._store: dict[str, dict[str, Any]] = defaultdict(dict)
        self._lock = asyncio.Lock()

    async def _load(self, entity_type: str, entity_id: str) -> Optional[Any]:
        entity = self._store[entity_type].get(entity_id)
        return copy.deepcopy(entity) if entity is not None else None

    async def _list_ids(self, entity_type: str) -> list[str]:
        return list(self._store[entity_type])

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[StagedUnitOfWork]:
        async with self._lock:
            uow = StagedUnitOfWork(self._load, self._list_ids)
            yield uow
            for entity_type, entity_id, value in uow.changes.items():
                if value is DELETED:
                    self._store[entity_type].pop(entity_id, None)
                else:
                    self._store[entity_type][entity_id] = value
            logger.debug(f"[Ledger] committed {len(uow.changes)} write(s)")
