"""
Shared fixtures: a seeded in-memory ledger, a processor wired to it and a
small async Redis double for the Redis adapters.

Run with: pytest backend/tests -v
"""

import fnmatch
from typing import Any

import pytest

from chatnet.application.processor import TransactionProcessor
from chatnet.domain.entities import User
from chatnet.domain.value_objects import ChatNetworkId, UserId
from chatnet.infrastructure.events import InMemoryEventSink
from chatnet.infrastructure.identity import ContextIdentityProvider
from chatnet.infrastructure.persistence import InMemoryLedger
from chatnet.setup.seed import seed_chat_network, seed_users

NETWORK_ID = "mainchatnetid001"

SOLIVAN = UserId("solivan@email.com")
FERZIN = UserId("ferzin@email.com")
KIAN = UserId("kian@email.com")

USERS = [
    User(id=SOLIVAN, first_name="Solivan", last_name="Miluxas"),
    User(id=FERZIN, first_name="Ferzin", last_name="Miluxas"),
    User(id=KIAN, first_name="Kian", last_name="Rad"),
]


async def seed(ledger) -> ChatNetworkId:
    network_id = await seed_chat_network(ledger, NETWORK_ID, "Main Chat Network 001")
    await seed_users(ledger, USERS)
    return network_id


@pytest.fixture()
async def ledger():
    ledger = InMemoryLedger()
    await seed(ledger)
    return ledger


@pytest.fixture()
def identity():
    return ContextIdentityProvider()


@pytest.fixture()
def sink():
    return InMemoryEventSink()


@pytest.fixture()
def processor(ledger, identity, sink):
    return TransactionProcessor(
        ledger=ledger,
        identity=identity,
        event_sink=sink,
        network_id=ChatNetworkId(NETWORK_ID),
    )


@pytest.fixture()
def submit_as(processor, identity):
    """Submit a record or command acting as the given user."""

    async def _submit(user: UserId, transaction: Any) -> Any:
        with identity.acting_as(user):
            return await processor.submit(transaction)

    return _submit


@pytest.fixture()
def group_chat(submit_as):
    """Open a group chat owned by Solivan."""

    async def _open(chat_id: str = "32556", chat_type: str = "PUBLIC_GROUP"):
        return await submit_as(
            SOLIVAN,
            {
                "$class": "org.miluxas.chatnet2.StartNewGroupChat",
                "newChatId": chat_id,
                "newChatTitle": "Chat Group Test",
                "type": chat_type,
            },
        )

    return _open


# ==================== REDIS DOUBLE ====================


class FakePipeline:
    def __init__(self, redis: "FakeRedis"):
        self._redis = redis
        self._ops: list[tuple[str, tuple]] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self._ops.clear()
        return False

    def set(self, key, value):
        self._ops.append(("set", (key, value)))
        return self

    def delete(self, key):
        self._ops.append(("delete", (key,)))
        return self

    def sadd(self, key, member):
        self._ops.append(("sadd", (key, member)))
        return self

    def srem(self, key, member):
        self._ops.append(("srem", (key, member)))
        return self

    async def execute(self):
        if self._redis.fail_execute:
            raise ConnectionError("pipeline failed")
        results = []
        for name, args in self._ops:
            results.append(await getattr(self._redis, name)(*args))
        self._redis.executed += 1
        self._ops.clear()
        return results


class FakeLock:
    def __init__(self, redis: "FakeRedis", name: str, timeout, blocking_timeout):
        self._redis = redis
        self.name = name
        self.timeout = timeout
        self.blocking_timeout = blocking_timeout

    async def __aenter__(self):
        self._redis.locks_taken.append(self.name)
        return self

    async def __aexit__(self, *exc):
        return False


class FakeRedis:
    """The slice of redis.asyncio.Redis the adapters use, kept in dicts."""

    def __init__(self):
        self.strings: dict[str, str] = {}
        self.sets: dict[str, set[str]] = {}
        self.published: list[tuple[str, str]] = []
        self.locks_taken: list[str] = []
        self.executed = 0
        self.fail_execute = False
        self.closed = False

    async def get(self, key):
        return self.strings.get(key)

    async def set(self, key, value):
        self.strings[key] = value
        return True

    async def delete(self, key):
        return 1 if self.strings.pop(key, None) is not None else 0

    async def sadd(self, key, member):
        self.sets.setdefault(key, set()).add(member)
        return 1

    async def srem(self, key, member):
        self.sets.get(key, set()).discard(member)
        return 1

    async def smembers(self, key):
        return set(self.sets.get(key, set()))

    async def publish(self, channel, message):
        self.published.append((channel, message))
        return 1

    async def ping(self):
        return True

    async def aclose(self):
        self.closed = True

    def keys_matching(self, pattern: str) -> list[str]:
        return sorted(k for k in self.strings if fnmatch.fnmatch(k, pattern))

    def lock(self, name, timeout=None, blocking_timeout=None):
        return FakeLock(self, name, timeout, blocking_timeout)

    def pipeline(self, transaction=True):
        return FakePipeline(self)


@pytest.fixture()
def fake_redis():
    return FakeRedis()
