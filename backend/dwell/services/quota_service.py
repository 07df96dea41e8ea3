"""Daily message allowance per sender/recipient pair."""

from datetime import datetime, timezone

from sqlalchemy import func
from sqlalchemy.orm import Session

from dwell.models import Message


def start_of_day(now: datetime) -> datetime:
    """Midnight UTC of the day containing ``now``."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)


class QuotaService:
    """Authoritative rate limit oracle.

    The allowance resets at midnight UTC. Clients only ever display the value
    this service computes; the send path re-checks it inside the insert
    transaction.
    """

    def __init__(self, db: Session, daily_limit: int):
        self.db = db
        self.daily_limit = daily_limit

    def count_sent_today(
        self, sender_id: int, recipient_id: int, now: datetime | None = None
    ) -> int:
        since = start_of_day(now or datetime.now(timezone.utc))
        return (
            self.db.query(func.count(Message.id))
            .filter(
                Message.sender_user_id == sender_id,
                Message.owner_user_id == recipient_id,
                Message.created_at >= since,
            )
            .scalar()
            or 0
        )

    def get_remaining(
        self, sender_id: int, recipient_id: int, now: datetime | None = None
    ) -> int:
        """Messages ``sender_id`` may still send to ``recipient_id`` today."""
        sent = self.count_sent_today(sender_id, recipient_id, now)
        return max(self.daily_limit - sent, 0)

    def can_send_today(
        self, sender_id: int, recipient_id: int, now: datetime | None = None
    ) -> bool:
        return self.get_remaining(sender_id, recipient_id, now) > 0
