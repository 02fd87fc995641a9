"""
Redis Ledger - records kept in Redis, one JSON string per entity.

Redis Data Structures:
- Record key:  "{prefix}:{EntityType}:{id}"  STRING, JSON of one entity
- Index key:   "{prefix}:{EntityType}:ids"   SET of ids, for get_all
- Lock key:    "{prefix}:ledger-lock"        redis-py Lock

Transactions:
- The ledger lock is held from the first read to the commit, so
  transactions never interleave across processes
- Staged writes go out in one MULTI/EXEC pipeline: all or nothing
- An exception inside the transaction skips the pipeline entirely

Example Usage:
    redis = await create_redis_client()  # chatnet.config.redis_client
    ledger = RedisLedger(redis)
    async with ledger.transaction() as uow:
        chat = await uow.chats.get(ChatId("32556"))
"""

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from redis.asyncio import Redis

from chatnet.config.settings import Config
from chatnet.domain.ports import Ledger
from chatnet.infrastructure.persistence import codec
from chatnet.infrastructure.persistence.staged_registry import DELETED
from chatnet.infrastructure.persistence.staged_unit_of_work import StagedUnitOfWork

logger = logging.getLogger(__name__)


class RedisLedger(Ledger):
    def __init__(
        self,
        redis: Redis,
        prefix: str = Config.REDIS_KEY_PREFIX,
        lock_timeout: float = Config.REDIS_LOCK_TIMEOUT,
        lock_blocking_timeout: float = Config.REDIS_LOCK_BLOCKING_TIMEOUT,
    ):
        self._redis = redis
        self._prefix = prefix
        self._lock_timeout = lock_timeout
        self._lock_blocking_timeout = lock_blocking_timeout

    def _record_key(self, entity_type: str, entity_id: str) -> str:
        return f"{self._prefix}:{entity_type}:{entity_id}"

    def _index_key(self, entity_type: str) -> str:
        return f"{self._prefix}:{entity_type}:ids"

    async def _load(self, entity_type: str, entity_id: str) -> Optional[Any]:
        raw = await self._redis.get(self._record_key(entity_type, entity_id))
        if raw is None:
            return None
        return codec.from_dict(entity_type, json.loads(raw))

    async def _list_ids(self, entity_type: str) -> list[str]:
        return sorted(await self._redis.smembers(self._index_key(entity_type)))

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[StagedUnitOfWork]:
        lock = self._redis.lock(
            f"{self._prefix}:ledger-lock",
            timeout=self._lock_timeout,
            blocking_timeout=self._lock_blocking_timeout,
        )
        # raises redis.exceptions.LockError when the lock cannot be taken
        async with lock:
            uow = StagedUnitOfWork(self._load, self._list_ids)
            yield uow
            await self._commit(uow)

    async def _commit(self, uow: StagedUnitOfWork) -> None:
        if not len(uow.changes):
            return
        async with self._redis.pipeline(transaction=True) as pipe:
            for entity_type, entity_id, value in uow.changes.items():
                record_key = self._record_key(entity_type, entity_id)
                index_key = self._index_key(entity_type)
                if value is DELETED:
                    pipe.delete(record_key)
                    pipe.srem(index_key, entity_id)
                else:
                    pipe.set(record_key, json.dumps(codec.to_dict(value)))
                    pipe.sadd(index_key, entity_id)
            await pipe.execute()
        logger.debug(f"[Redis] committed {len(uow.changes)} write(s)")

    async def close(self) -> None:
        await self._redis.aclose()
        logger.info("[Redis] Connection closed")
