"""
Redis event sink - one PUBLISH per committed event.

Payload is the JSON of DomainEvent.to_dict(), e.g.
    {"event": "MessageSent", "chat": "32556", "message": "...", ...}
"""

import json
import logging

from redis.asyncio import Redis

from chatnet.config.settings import Config
from chatnet.domain.events import DomainEvent
from chatnet.domain.ports import EventSink

logger = logging.getLogger(__name__)


class RedisEventSink(EventSink):
    def __init__(self, redis: Redis, channel: str = Config.REDIS_EVENT_CHANNEL):
        self._redis = redis
        self._channel = channel

    async def publish(self, event: DomainEvent) -> None:
        receivers = await self._redis.publish(self._channel, json.dumps(event.to_dict()))
        logger.debug(f"[Event] {event.name} -> {self._channel} ({receivers} receiver(s))")
