"""Change notification feeds for the registrations collection.

A feed delivers a ChangeEvent to every active subscriber whenever a record
is inserted. Consumers only rely on "something changed" and re-read.
"""

import asyncio
import json
import logging
import threading
from contextlib import asynccontextmanager
from dataclasses import asdict, dataclass
from typing import AsyncIterator, Optional

import redis
import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeEvent:
    """A change on a watched table"""

    event_type: str
    table: str
    record_id: Optional[str] = None

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, payload) -> "ChangeEvent":
        data = json.loads(payload)
        return cls(
            event_type=data.get("event_type", "UNKNOWN"),
            table=data.get("table", ""),
            record_id=data.get("record_id"),
        )


class InMemoryChangeFeed:
    """Single-process feed backed by one asyncio queue per subscriber"""

    def __init__(self):
        self._subscribers: set[tuple[asyncio.AbstractEventLoop, asyncio.Queue]] = set()
        self._lock = threading.Lock()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def publish(self, event: ChangeEvent) -> None:
        """Deliver an event to every subscriber. Safe to call from any thread."""
        with self._lock:
            subscribers = list(self._subscribers)

        for loop, queue in subscribers:
            try:
                loop.call_soon_threadsafe(queue.put_nowait, event)
            except RuntimeError:
                # Subscriber's loop is closed; it will never unsubscribe itself
                logger.warning("Dropping change feed subscriber with a closed loop")
                with self._lock:
                    self._subscribers.discard((loop, queue))

    @asynccontextmanager
    async def subscribe(self) -> AsyncIterator[AsyncIterator[ChangeEvent]]:
        """Register a subscriber for the lifetime of the ``async with`` block"""
        entry = (asyncio.get_running_loop(), asyncio.Queue())
        with self._lock:
            self._subscribers.add(entry)
        logger.info("Change feed subscriber registered")

        try:
            yield self._iterate(entry[1])
        finally:
            with self._lock:
                self._subscribers.discard(entry)
            logger.info("Change feed subscriber released")

    async def _iterate(self, queue: asyncio.Queue) -> AsyncIterator[ChangeEvent]:
        while True:
            yield await queue.get()

    async def close(self) -> None:
        with self._lock:
            self._subscribers.clear()


class RedisChangeFeed:
    """Multi-process feed on a redis pub/sub channel"""

    def __init__(
        self,
        client: redis.Redis,
        async_client: aioredis.Redis,
        channel: str = "inscricoes-changes",
    ):
        self.client = client
        self.async_client = async_client
        self.channel = channel

    @classmethod
    def from_url(cls, redis_url: str, channel: str) -> "RedisChangeFeed":
        return cls(
            redis.from_url(
                redis_url,
                decode_responses=True,
                socket_connect_timeout=5,
                retry_on_timeout=True,
            ),
            aioredis.from_url(
                redis_url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_keepalive=True,
            ),
            channel=channel,
        )

    def publish(self, event: ChangeEvent) -> None:
        try:
            self.client.publish(self.channel, event.to_json())
        except redis.RedisError as e:
            # The record is already stored; dashboards only miss a live refresh
            logger.error(f"Redis error publishing change on {self.channel}: {e}")

    @asynccontextmanager
    async def subscribe(self) -> AsyncIterator[AsyncIterator[ChangeEvent]]:
        pubsub = self.async_client.pubsub()
        await pubsub.subscribe(self.channel)
        logger.info(f"Subscribed to redis channel {self.channel}")

        try:
            yield self._iterate(pubsub)
        finally:
            await pubsub.unsubscribe(self.channel)
            await pubsub.aclose()
            logger.info(f"Unsubscribed from redis channel {self.channel}")

    async def _iterate(self, pubsub) -> AsyncIterator[ChangeEvent]:
        async for message in pubsub.listen():
            if message.get("type") != "message":
                continue
            try:
                yield ChangeEvent.from_json(message["data"])
            except (ValueError, TypeError):
                logger.warning(f"Ignoring malformed change message: {message!r}")

    async def close(self) -> None:
        self.client.close()
        await self.async_client.aclose()
