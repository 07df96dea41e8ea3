"""Realtime feed of inserted messages using Redis pub/sub."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Optional

import redis.asyncio as redis

from dwell.config.redis import redis_settings
from dwell.models import Message
from dwell.schemas.realtime import MessageInsertEvent, MessageRow

logger = logging.getLogger(__name__)


class RealtimeBroker:
    """Publishes message inserts and streams them to the recipient.

    Each recipient has one channel. Only events whose ``owner_user_id``
    matches the listening user are yielded.
    """

    def __init__(self, redis_url: str, channel_prefix: str | None = None) -> None:
        self.redis_url = redis_url
        self.channel_prefix = channel_prefix or redis_settings.realtime_channel_prefix
        self._redis: Optional[redis.Redis] = None

    @asynccontextmanager
    async def _get_redis(self) -> AsyncGenerator[redis.Redis, None]:
        """Get Redis connection with context manager."""
        if not self._redis:
            self._redis = await redis.from_url(
                self.redis_url,
                max_connections=redis_settings.redis_max_connections,
                decode_responses=redis_settings.redis_decode_responses,
                socket_timeout=redis_settings.redis_socket_timeout,
                retry_on_timeout=redis_settings.redis_retry_on_timeout,
            )

        try:
            yield self._redis
        except Exception as e:
            logger.error(f"Redis error: {e}")
            raise

    async def close(self) -> None:
        """Close Redis connection."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None

    def channel_for(self, user_id: int) -> str:
        return f"{self.channel_prefix}messages:{user_id}"

    async def publish_message_insert(self, message: Message) -> bool:
        """Publish an INSERT event for ``message``.

        The message is already committed, so a publish failure is logged and
        reported as ``False`` instead of failing the send.
        """
        event = MessageInsertEvent(
            new=MessageRow(
                id=message.id,
                listing_id=message.listing_id,
                sender_user_id=message.sender_user_id,
                owner_user_id=message.owner_user_id,
                created_at=message.created_at,
            )
        )
        try:
            async with self._get_redis() as r:
                await r.publish(
                    self.channel_for(message.owner_user_id), event.model_dump_json()
                )
            return True
        except Exception as e:
            logger.warning(f"Failed to publish insert of message {message.id}: {e}")
            return False

    async def listen(
        self, user_id: int, heartbeat_seconds: float = 15.0
    ) -> AsyncGenerator[MessageInsertEvent | None, None]:
        """Yield insert events for ``user_id``.

        ``None`` is yielded whenever ``heartbeat_seconds`` pass without an
        event, so callers can keep the connection alive.
        """
        async with self._get_redis() as r:
            pubsub = r.pubsub()
            await pubsub.subscribe(self.channel_for(user_id))
            try:
                while True:
                    raw = await pubsub.get_message(
                        ignore_subscribe_messages=True, timeout=heartbeat_seconds
                    )
                    if raw is None:
                        yield None
                        continue
                    if raw.get("type") != "message":
                        continue

                    try:
                        event = MessageInsertEvent.model_validate_json(raw["data"])
                    except ValueError as e:
                        logger.warning(f"Dropping malformed realtime payload: {e}")
                        continue
                    if event.new.owner_user_id != user_id:
                        continue
                    yield event
            finally:
                await pubsub.unsubscribe(self.channel_for(user_id))
                await pubsub.aclose()
