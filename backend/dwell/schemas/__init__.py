from .admin import (
    ListingModerationResponse,
    ListingModerationUpdate,
    ReportListResponse,
    SuspensionUpdate,
    UserModerationResponse,
)
from .block import BlockCreate, BlockResponse, BlockStatus
from .listing import ListingSummary
from .message import (
    BodyCheck,
    InboxMessage,
    MessageCreate,
    MessageCreated,
    MessageResponse,
    QuotaResponse,
    UnreadCount,
    check_body,
    count_words,
)
from .notification import NotificationRequest, NotificationResult
from .realtime import MessageInsertEvent, MessageRow
from .report import ReportCreate, ReportResponse, categories_for

__all__ = [
    # Message schemas
    "BodyCheck",
    "InboxMessage",
    "MessageCreate",
    "MessageCreated",
    "MessageResponse",
    "QuotaResponse",
    "UnreadCount",
    "check_body",
    "count_words",
    # Block schemas
    "BlockCreate",
    "BlockResponse",
    "BlockStatus",
    # Report schemas
    "ReportCreate",
    "ReportResponse",
    "categories_for",
    # Notification schemas
    "NotificationRequest",
    "NotificationResult",
    # Realtime schemas
    "MessageInsertEvent",
    "MessageRow",
    # Listing schemas
    "ListingSummary",
    # Admin schemas
    "ListingModerationResponse",
    "ListingModerationUpdate",
    "ReportListResponse",
    "SuspensionUpdate",
    "UserModerationResponse",
]
