"""
Event sinks - where committed domain events go.

- InMemoryEventSink: keeps events in a list (tests, embedding hosts)
- LoggingEventSink: writes one log line per event
- RedisEventSink: publishes JSON on a Redis pub/sub channel
"""

from chatnet.infrastructure.events.in_memory_event_sink import InMemoryEventSink
from chatnet.infrastructure.events.logging_event_sink import LoggingEventSink
from chatnet.infrastructure.events.redis_event_sink import RedisEventSink

__all__ = [
    "InMemoryEventSink",
    "LoggingEventSink",
    "RedisEventSink",
]
