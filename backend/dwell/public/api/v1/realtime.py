"""Server-sent events feed of incoming messages."""

import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from dwell.config.public import PublicSettings
from dwell.core.dependencies import get_current_user_id, get_realtime_broker, get_settings
from dwell.services import RealtimeBroker

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/realtime", tags=["realtime"])


def sse_format(data: str, event: str | None = None) -> bytes:
    chunks = []
    if event:
        chunks.append(f"event: {event}\n")
    chunks.append(f"data: {data}\n\n")
    return "".join(chunks).encode("utf-8")


def sse_retry(ms: int = 5000) -> bytes:
    return f"retry: {ms}\n\n".encode("utf-8")


@router.get("/messages")
async def stream_incoming_messages(
    request: Request,
    user_id: int = Depends(get_current_user_id),
    broker: RealtimeBroker = Depends(get_realtime_broker),
    app_settings: PublicSettings = Depends(get_settings),
) -> StreamingResponse:
    """Stream INSERT events for messages addressed to the current user.

    A ``heartbeat`` event is sent whenever the feed has been idle for
    ``SSE_HEARTBEAT_SECONDS``.
    """

    async def event_stream() -> AsyncGenerator[bytes, None]:
        yield sse_retry()
        logger.info(f"Realtime stream opened for user {user_id}")
        events = broker.listen(user_id, heartbeat_seconds=app_settings.SSE_HEARTBEAT_SECONDS)
        try:
            async for event in events:
                if await request.is_disconnected():
                    break
                if event is None:
                    yield sse_format("{}", event="heartbeat")
                    continue
                yield sse_format(event.model_dump_json(), event="message")
        finally:
            await events.aclose()
            logger.info(f"Realtime stream closed for user {user_id}")

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
