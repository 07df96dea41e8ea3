"""Boundary client for the Dwell public API."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from dwell.core.exceptions import ErrorKind
from dwell.schemas.block import DEFAULT_BLOCK_REASON, BlockResponse
from dwell.schemas.listing import ListingSummary
from dwell.schemas.message import (
    InboxMessage,
    MessageCreate,
    MessageCreated,
    MessageResponse,
    QuotaResponse,
    UnreadCount,
)
from dwell.schemas.notification import NotificationRequest, NotificationResult
from dwell.schemas.realtime import MessageInsertEvent
from dwell.schemas.report import ReportCreate, ReportResponse

logger = logging.getLogger(__name__)

InsertHandler = Callable[[MessageInsertEvent], Awaitable[None]]

_KIND_BY_STATUS = {
    422: ErrorKind.VALIDATION,
    429: ErrorKind.RATE_LIMITED,
}


class DwellAPIError(Exception):
    """A call to the public API failed.

    ``kind`` is the structured error kind reported by the server, or
    ``UNKNOWN`` for transport failures and unclassified errors.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.UNKNOWN,
        status_code: int | None = None,
        error_code: str | None = None,
    ):
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(message)


class SendError(DwellAPIError):
    """Inserting a message was rejected or could not be attempted."""

    pass


def error_from_response(response: httpx.Response, error_cls: type[DwellAPIError] = DwellAPIError):
    """Build an error from the server's ``{"error", "message", "details"}`` envelope."""
    try:
        payload = response.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}

    details = payload.get("details") or {}
    raw_kind = details.get("kind") if isinstance(details, dict) else None
    try:
        kind = ErrorKind(raw_kind)
    except ValueError:
        kind = _KIND_BY_STATUS.get(response.status_code, ErrorKind.UNKNOWN)

    message = payload.get("message") or payload.get("detail") or response.reason_phrase
    if not isinstance(message, str):
        message = str(message)
    return error_cls(
        message,
        kind=kind,
        status_code=response.status_code,
        error_code=payload.get("error"),
    )


class Subscription:
    """Handle for a realtime subscription; ``unsubscribe`` is its disposer."""

    def __init__(self, task: asyncio.Task):
        self._task = task
        self._closed = False

    @property
    def active(self) -> bool:
        return not self._closed

    async def unsubscribe(self) -> bool:
        """Stop the stream. Only the first call has an effect."""
        if self._closed:
            return False
        self._closed = True
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        return True


class DwellAPI:
    """Async client for the public API, used as an async context manager."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
        reconnect_delay: float = 5.0,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the public API, including the version prefix
            token: Bearer token issued by the auth service
            timeout: Request timeout in seconds
            transport: Optional transport override
            reconnect_delay: Seconds to wait before reopening a dropped stream
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.reconnect_delay = reconnect_delay
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "DwellAPI":
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"Content-Type": "application/json"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get HTTP client."""
        if not self._client:
            raise RuntimeError("DwellAPI must be used as async context manager")
        return self._client

    def _auth_headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    async def _request(
        self,
        method: str,
        path: str,
        error_cls: type[DwellAPIError] = DwellAPIError,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = await self.client.request(
                method, path, headers=self._auth_headers(), **kwargs
            )
        except httpx.RequestError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise error_cls(f"Failed to reach Dwell API: {e}") from e

        if response.status_code >= 400:
            raise error_from_response(response, error_cls)
        return response

    async def get_remaining_quota(self, recipient_id: int) -> int | None:
        """Remaining daily allowance towards ``recipient_id``; ``None`` if unknown."""
        try:
            response = await self._request(
                "GET", "/messages/quota", params={"recipient_id": recipient_id}
            )
            return QuotaResponse.model_validate(response.json()).remaining
        except (DwellAPIError, PydanticValidationError) as e:
            logger.error(f"Failed to fetch quota for recipient {recipient_id}: {e}")
            return None

    async def is_blocked(self, target_user_id: int) -> bool:
        response = await self._request("GET", f"/blocks/{target_user_id}")
        return bool(response.json()["is_blocked"])

    async def create_block(
        self, target_user_id: int, reason: str = DEFAULT_BLOCK_REASON
    ) -> BlockResponse:
        response = await self._request(
            "POST", "/blocks", json={"target_user_id": target_user_id, "reason": reason}
        )
        return BlockResponse.model_validate(response.json())

    async def remove_block(self, target_user_id: int) -> None:
        await self._request("DELETE", f"/blocks/{target_user_id}")

    async def insert_message(
        self, listing_id: int, owner_user_id: int, body: str
    ) -> MessageCreated:
        """Insert a message; raises :class:`SendError` carrying the failure kind."""
        data = MessageCreate(listing_id=listing_id, owner_user_id=owner_user_id, body=body)
        response = await self._request(
            "POST", "/messages", error_cls=SendError, json=data.model_dump()
        )
        return MessageCreated.model_validate(response.json())

    async def mark_message_read(self, message_id: int) -> MessageResponse:
        response = await self._request("POST", f"/messages/{message_id}/read")
        return MessageResponse.model_validate(response.json())

    async def list_inbox(self, skip: int = 0, limit: int = 50) -> list[InboxMessage]:
        response = await self._request(
            "GET", "/messages/inbox", params={"skip": skip, "limit": limit}
        )
        return [InboxMessage.model_validate(row) for row in response.json()]

    async def get_unread_count(self) -> int:
        response = await self._request("GET", "/messages/unread-count")
        return UnreadCount.model_validate(response.json()).unread

    async def get_message(self, message_id: int) -> MessageResponse:
        response = await self._request("GET", f"/messages/{message_id}")
        return MessageResponse.model_validate(response.json())

    async def get_listing(self, listing_id: int) -> ListingSummary:
        response = await self._request("GET", f"/listings/{listing_id}")
        return ListingSummary.model_validate(response.json())

    async def dispatch_notification(self, request: NotificationRequest) -> NotificationResult:
        response = await self._request(
            "POST", "/notifications/message", json=request.model_dump()
        )
        return NotificationResult.model_validate(response.json())

    async def create_report(self, report: ReportCreate) -> ReportResponse:
        response = await self._request(
            "POST", "/reports", json=report.model_dump(mode="json")
        )
        return ReportResponse.model_validate(response.json())

    def subscribe_to_incoming_messages(
        self, recipient_id: int, on_insert: InsertHandler
    ) -> Subscription:
        """Stream insert events addressed to ``recipient_id`` into ``on_insert``.

        The stream is reopened after ``reconnect_delay`` seconds if it drops.
        """
        task = asyncio.create_task(
            self._stream_inserts(recipient_id, on_insert),
            name=f"dwell-realtime-{recipient_id}",
        )
        return Subscription(task)

    async def _stream_inserts(self, recipient_id: int, on_insert: InsertHandler) -> None:
        while True:
            try:
                async with self.client.stream(
                    "GET",
                    "/realtime/messages",
                    headers={**self._auth_headers(), "Accept": "text/event-stream"},
                    timeout=httpx.Timeout(self.timeout, read=None),
                ) as response:
                    if response.status_code >= 400:
                        await response.aread()
                        raise error_from_response(response)
                    async for event, data in iter_sse(response):
                        if event != "message":
                            continue
                        await self._deliver(recipient_id, data, on_insert)
            except asyncio.CancelledError:
                raise
            except (httpx.HTTPError, DwellAPIError) as e:
                logger.warning(f"Realtime stream for user {recipient_id} dropped: {e}")
            await asyncio.sleep(self.reconnect_delay)

    async def _deliver(self, recipient_id: int, data: str, on_insert: InsertHandler) -> None:
        try:
            event = MessageInsertEvent.model_validate_json(data)
        except PydanticValidationError as e:
            logger.warning(f"Ignoring malformed realtime event: {e}")
            return
        if event.new.owner_user_id != recipient_id:
            return
        try:
            await on_insert(event)
        except Exception as e:
            logger.error(f"Insert handler failed for message {event.new.id}: {e}", exc_info=True)


async def iter_sse(response: httpx.Response):
    """Yield ``(event, data)`` pairs from a ``text/event-stream`` body."""
    event = "message"
    data: list[str] = []
    async for line in response.aiter_lines():
        if not line:
            if data:
                yield event, "\n".join(data)
            event, data = "message", []
            continue
        if line.startswith(":"):
            continue
        field, _, value = line.partition(":")
        value = value[1:] if value.startswith(" ") else value
        if field == "event":
            event = value
        elif field == "data":
            data.append(value)
