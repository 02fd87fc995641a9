"""
Ledger Port - transaction boundary over the entity registries.

    async with ledger.transaction() as uow:
        chat = await uow.chats.get(chat_id)
        ...
        await uow.chats.update(chat)

Writes made through ``uow`` become visible together when the block exits
normally. If the block raises, nothing is written and staged events are
dropped. The ledger also serializes transactions; handlers never lock.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from chatnet.domain.entities import Chat, ChatNetwork, Member, Message, User
from chatnet.domain.events import DomainEvent
from chatnet.domain.ports.registry import Registry
from chatnet.domain.value_objects import (
    ChatId,
    ChatNetworkId,
    MemberId,
    MessageId,
    UserId,
)


class UnitOfWork(ABC):
    users: Registry[UserId, User]
    members: Registry[MemberId, Member]
    messages: Registry[MessageId, Message]
    chats: Registry[ChatId, Chat]
    chat_networks: Registry[ChatNetworkId, ChatNetwork]

    def __init__(self):
        self._events: list[DomainEvent] = []

    def emit(self, event: DomainEvent) -> None:
        """Stage an event; it is published only if the transaction commits."""
        self._events.append(event)

    @property
    def events(self) -> list[DomainEvent]:
        return list(self._events)


class Ledger(ABC):
    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[UnitOfWork]: ...

    async def close(self) -> None:
        return None
