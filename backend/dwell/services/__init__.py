from .block_service import BlockService
from .message_service import MessageService
from .moderation_service import ModerationService
from .notification_dispatcher import NotificationDispatcher
from .quota_service import QuotaService
from .realtime import RealtimeBroker
from .report_service import ReportService
from .retry_handler import RetryHandler

__all__ = [
    "BlockService",
    "MessageService",
    "ModerationService",
    "NotificationDispatcher",
    "QuotaService",
    "RealtimeBroker",
    "ReportService",
    "RetryHandler",
]
