"""Public API notification dispatch."""

from fastapi import APIRouter, Depends

from dwell.core.dependencies import get_current_user, get_notification_dispatcher
from dwell.models import User
from dwell.schemas.notification import NotificationRequest, NotificationResult
from dwell.services import NotificationDispatcher

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post("/message", response_model=NotificationResult)
async def notify_message_recipient(
    request: NotificationRequest,
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> NotificationResult:
    """Email the recipient of a message the current user just sent."""
    return await dispatcher.dispatch(current_user.id, request)
