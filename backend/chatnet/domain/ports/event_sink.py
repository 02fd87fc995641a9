"""
EventSink Port - channel for committed domain events.
"""

from abc import ABC, abstractmethod

from chatnet.domain.events import DomainEvent


class EventSink(ABC):
    @abstractmethod
    async def publish(self, event: DomainEvent) -> None: ...
