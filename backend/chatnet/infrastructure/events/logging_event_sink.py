import logging

from chatnet.domain.events import DomainEvent
from chatnet.domain.ports import EventSink

logger = logging.getLogger(__name__)


class LoggingEventSink(EventSink):
    async def publish(self, event: DomainEvent) -> None:
        logger.info(f"[Event] {event.name} {event.to_dict()}")
