from typing import Awaitable, Callable

from chatnet.domain.events import DomainEvent
from chatnet.domain.ports import EventSink

Subscriber = Callable[[DomainEvent], Awaitable[None]]


class InMemoryEventSink(EventSink):
    """Collects published events in order and fans them out to subscribers."""

    def __init__(self):
        self.events: list[DomainEvent] = []
        self._subscribers: list[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    async def publish(self, event: DomainEvent) -> None:
        self.events.append(event)
        for subscriber in self._subscribers:
            await subscriber(event)

    def names(self) -> list[str]:
        return [event.name for event in self.events]

    def clear(self) -> None:
        self.events.clear()
