"""Notification sinks for game events.

Sinks own delivery and ordering: each emitted event is given the next
sequence number before it is stored.
"""

import logging
from typing import Protocol

from pydantic import TypeAdapter
from upstash_redis import Redis

from .engine.events import AnyGameEvent, GameEvent

logger = logging.getLogger(__name__)

_event_adapter = TypeAdapter(AnyGameEvent)


class NotificationSink(Protocol):
    def emit(self, event: GameEvent) -> None: ...

    def since(self, seq: int = 0) -> list[GameEvent]: ...


class InMemoryNotificationSink:
    def __init__(self) -> None:
        self._events: list[GameEvent] = []

    @property
    def events(self) -> list[GameEvent]:
        return list(self._events)

    def emit(self, event: GameEvent) -> None:
        event.seq = len(self._events)
        self._events.append(event)
        logger.debug("Event emitted: type=%s, seq=%d", event.event_type, event.seq)

    def since(self, seq: int = 0) -> list[GameEvent]:
        """Events with a sequence number of at least seq."""
        return [e for e in self._events if e.seq >= seq]


class RedisNotificationSink:
    """Appends events as JSON to '<prefix>:events'."""

    def __init__(self, client: Redis, prefix: str = "coinflip") -> None:
        self._client = client
        self._list_key = f"{prefix}:events"
        self._seq_key = f"{prefix}:event_seq"

    def emit(self, event: GameEvent) -> None:
        event.seq = self._client.incr(self._seq_key) - 1
        self._client.rpush(self._list_key, event.model_dump_json())
        logger.debug("Event pushed to Redis: type=%s, seq=%d", event.event_type, event.seq)

    def since(self, seq: int = 0) -> list[GameEvent]:
        # seq equals the list index
        raw_events = self._client.lrange(self._list_key, seq, -1)
        return [_event_adapter.validate_json(raw) for raw in raw_events]
