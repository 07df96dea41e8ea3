"""Public API message endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, status

from dwell.core.dependencies import (
    get_current_user,
    get_message_service,
    get_quota_service,
    get_realtime_broker,
)
from dwell.models import User
from dwell.schemas.message import (
    InboxMessage,
    MessageCreate,
    MessageCreated,
    MessageResponse,
    QuotaResponse,
    UnreadCount,
)
from dwell.services import MessageService, QuotaService, RealtimeBroker

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("/quota", response_model=QuotaResponse)
async def get_remaining_quota(
    recipient_id: int = Query(..., description="Listing owner the user wants to message"),
    current_user: User = Depends(get_current_user),
    quota_service: QuotaService = Depends(get_quota_service),
) -> QuotaResponse:
    """Messages the current user may still send to ``recipient_id`` today."""
    remaining = quota_service.get_remaining(current_user.id, recipient_id)
    return QuotaResponse(
        recipient_id=recipient_id,
        remaining=remaining,
        daily_limit=quota_service.daily_limit,
    )


@router.post("", response_model=MessageCreated, status_code=status.HTTP_201_CREATED)
async def send_message(
    message_data: MessageCreate,
    current_user: User = Depends(get_current_user),
    message_service: MessageService = Depends(get_message_service),
    broker: RealtimeBroker = Depends(get_realtime_broker),
) -> MessageCreated:
    """Send a message to a listing owner.

    Block, quota, suspension and body rules are enforced here regardless of
    what the client checked beforehand.
    """
    message = message_service.insert_message(current_user.id, message_data)
    await broker.publish_message_insert(message)
    return MessageCreated.model_validate(message)


@router.get("/inbox", response_model=list[InboxMessage])
async def list_inbox(
    skip: int = Query(0, ge=0, description="Number of messages to skip"),
    limit: int = Query(50, ge=1, le=100, description="Number of messages to return"),
    current_user: User = Depends(get_current_user),
    message_service: MessageService = Depends(get_message_service),
) -> list[InboxMessage]:
    """Messages received by the current user, newest first."""
    return message_service.list_inbox(current_user.id, skip=skip, limit=limit)


@router.get("/unread-count", response_model=UnreadCount)
async def get_unread_count(
    current_user: User = Depends(get_current_user),
    message_service: MessageService = Depends(get_message_service),
) -> UnreadCount:
    return UnreadCount(unread=message_service.unread_count(current_user.id))


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    message_id: int,
    current_user: User = Depends(get_current_user),
    message_service: MessageService = Depends(get_message_service),
) -> MessageResponse:
    message = message_service.get_message(message_id, current_user.id)
    return MessageResponse.model_validate(message)


@router.post("/{message_id}/read", response_model=MessageResponse)
async def mark_message_read(
    message_id: int,
    current_user: User = Depends(get_current_user),
    message_service: MessageService = Depends(get_message_service),
) -> MessageResponse:
    """Mark a received message as read. Repeated calls keep the first timestamp."""
    message = message_service.mark_as_read(message_id, current_user.id)
    return MessageResponse.model_validate(message)
