"""
Dishka DI Container Setup.

- AppProvider: identity, network id and the transaction processor
- One ledger provider and one event sink provider, picked from Config
- RedisProvider joins only when the ledger or the sink needs Redis

Flow:
  Container → provides → Ledger (InMemoryLedger | RedisLedger)
                               ↓
                     TransactionProcessor ← IdentityProvider, EventSink

Usage:
    container = await create_container()
    processor = await container.get(TransactionProcessor)
    ...
    await container.close()
"""

from typing import AsyncIterable, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from redis.asyncio import Redis

from chatnet.application.processor import TransactionProcessor
from chatnet.config.redis_client import create_redis_client
from chatnet.config.settings import Config
from chatnet.domain.ports import EventSink, IdentityProvider, Ledger
from chatnet.domain.value_objects import ChatNetworkId
from chatnet.infrastructure.events import (
    InMemoryEventSink,
    LoggingEventSink,
    RedisEventSink,
)
from chatnet.infrastructure.identity import ContextIdentityProvider
from chatnet.infrastructure.persistence import InMemoryLedger, RedisLedger

LEDGER_BACKENDS = ("memory", "redis")
EVENT_SINKS = ("memory", "logging", "redis")


class AppProvider(Provider):
    """
    Application dependency provider.

    Everything is APP scoped: one processor, one ledger and one identity
    provider for the lifetime of the container.
    """

    @provide(scope=Scope.APP)
    def get_network_id(self) -> ChatNetworkId:
        return ChatNetworkId(Config.CHAT_NETWORK_ID)

    @provide(scope=Scope.APP)
    def get_identity(self) -> IdentityProvider:
        return ContextIdentityProvider()

    @provide(scope=Scope.APP)
    def get_processor(
        self,
        ledger: Ledger,
        identity: IdentityProvider,
        event_sink: EventSink,
        network_id: ChatNetworkId,
    ) -> TransactionProcessor:
        return TransactionProcessor(
            ledger=ledger,
            identity=identity,
            event_sink=event_sink,
            network_id=network_id,
        )


class RedisProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[Redis]:
        """
        Provide the Redis client (singleton, app-scoped).

        - async because the client pings the server before it is handed out
        - closed when the container closes
        """
        client = await create_redis_client()
        yield client
        await client.aclose()


class InMemoryLedgerProvider(Provider):
    @provide(scope=Scope.APP)
    def get_ledger(self) -> Ledger:
        return InMemoryLedger()


class RedisLedgerProvider(Provider):
    @provide(scope=Scope.APP)
    def get_ledger(self, redis: Redis) -> Ledger:
        return RedisLedger(
            redis,
            prefix=Config.REDIS_KEY_PREFIX,
            lock_timeout=Config.REDIS_LOCK_TIMEOUT,
            lock_blocking_timeout=Config.REDIS_LOCK_BLOCKING_TIMEOUT,
        )


class InMemoryEventSinkProvider(Provider):
    @provide(scope=Scope.APP)
    def get_event_sink(self) -> EventSink:
        return InMemoryEventSink()


class LoggingEventSinkProvider(Provider):
    @provide(scope=Scope.APP)
    def get_event_sink(self) -> EventSink:
        return LoggingEventSink()


class RedisEventSinkProvider(Provider):
    @provide(scope=Scope.APP)
    def get_event_sink(self, redis: Redis) -> EventSink:
        return RedisEventSink(redis, channel=Config.REDIS_EVENT_CHANNEL)


def build_providers(
    ledger_backend: Optional[str] = None, event_sink: Optional[str] = None
) -> list[Provider]:
    ledger_backend = ledger_backend or Config.LEDGER_BACKEND
    event_sink = event_sink or Config.EVENT_SINK
    if ledger_backend not in LEDGER_BACKENDS:
        raise ValueError(f"LEDGER_BACKEND must be one of {LEDGER_BACKENDS}, got {ledger_backend!r}")
    if event_sink not in EVENT_SINKS:
        raise ValueError(f"EVENT_SINK must be one of {EVENT_SINKS}, got {event_sink!r}")

    providers: list[Provider] = [AppProvider()]

    if ledger_backend == "redis":
        providers.append(RedisLedgerProvider())
    else:
        providers.append(InMemoryLedgerProvider())

    if event_sink == "redis":
        providers.append(RedisEventSinkProvider())
    elif event_sink == "memory":
        providers.append(InMemoryEventSinkProvider())
    else:
        providers.append(LoggingEventSinkProvider())

    if "redis" in (ledger_backend, event_sink):
        providers.append(RedisProvider())
    return providers


async def create_container(
    ledger_backend: Optional[str] = None, event_sink: Optional[str] = None
) -> AsyncContainer:
    """
    Create and configure the DI container.

    - make_async_container() creates the container with all providers
    - Call this ONCE at app startup
    """
    return make_async_container(*build_providers(ledger_backend, event_sink))
