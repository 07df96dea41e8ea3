"""Message store operations with the authoritative send checks."""

import logging
from datetime import datetime, timezone

from sqlalchemy import desc, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dwell.core.exceptions import (
    AccountSuspendedError,
    DatabaseError,
    MessagingBlockedError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from dwell.models import Listing, Message, User
from dwell.schemas.message import (
    DEFAULT_MAX_CHARS,
    DEFAULT_MAX_WORDS,
    InboxMessage,
    MessageCreate,
    check_body,
)
from dwell.services.block_service import BlockService
from dwell.services.quota_service import QuotaService

logger = logging.getLogger(__name__)

UNKNOWN_LISTING_TITLE = "Unknown Listing"


class MessageService:
    """Service for message data operations."""

    def __init__(
        self,
        db: Session,
        quota_service: QuotaService,
        block_service: BlockService,
        max_words: int = DEFAULT_MAX_WORDS,
        max_chars: int = DEFAULT_MAX_CHARS,
    ):
        self.db = db
        self.quota_service = quota_service
        self.block_service = block_service
        self.max_words = max_words
        self.max_chars = max_chars

    def insert_message(
        self, sender_id: int, message_data: MessageCreate, now: datetime | None = None
    ) -> Message:
        """Store a message after re-checking every send rule.

        The sender row is locked for the duration of the transaction so that
        concurrent sends from the same account are counted one after another.
        """
        now = now or datetime.now(timezone.utc)
        recipient_id = message_data.owner_user_id

        sender = self.db.query(User).filter(User.id == sender_id).with_for_update().first()
        if sender is None:
            raise NotFoundError("User", sender_id)
        if sender.is_suspended or not sender.is_active:
            self.db.rollback()
            raise AccountSuspendedError()

        try:
            self._check_message(sender_id, message_data, now)
        except Exception:
            self.db.rollback()
            raise

        message = Message(
            listing_id=message_data.listing_id,
            sender_user_id=sender_id,
            owner_user_id=recipient_id,
            body=message_data.body.strip(),
            created_at=now,
        )
        self.db.add(message)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to store message from {sender_id} to {recipient_id}: {e}")
            raise DatabaseError("Failed to store message") from e

        self.db.refresh(message)
        logger.info(f"Stored message {message.id} from {sender_id} to {recipient_id}")
        return message

    def _check_message(self, sender_id: int, message_data: MessageCreate, now: datetime) -> None:
        recipient_id = message_data.owner_user_id
        if sender_id == recipient_id:
            raise ValidationError(
                "You cannot send a message to your own listing", field="owner_user_id"
            )

        body_check = check_body(message_data.body, self.max_words, self.max_chars)
        if body_check.is_empty:
            raise ValidationError("Please enter a message to send", field="body")
        if not body_check.is_valid:
            raise ValidationError(" ".join(body_check.errors), field="body")

        listing = self.db.get(Listing, message_data.listing_id)
        if listing is None or not listing.is_visible_to(sender_id):
            raise NotFoundError("Listing", message_data.listing_id)
        if listing.owner_user_id != recipient_id:
            raise ValidationError("Recipient does not own this listing", field="owner_user_id")

        if self.block_service.is_blocked(sender_id, recipient_id):
            raise MessagingBlockedError()

        if not self.quota_service.can_send_today(sender_id, recipient_id, now):
            raise RateLimitError(
                "Rate limit exceeded: daily message limit reached",
                details={"daily_limit": self.quota_service.daily_limit},
            )

    def list_inbox(self, owner_id: int, skip: int = 0, limit: int = 50) -> list[InboxMessage]:
        """Messages received by ``owner_id``, newest first."""
        rows = (
            self.db.query(Message, Listing)
            .outerjoin(Listing, Message.listing_id == Listing.id)
            .filter(Message.owner_user_id == owner_id)
            .order_by(desc(Message.created_at), desc(Message.id))
            .offset(skip)
            .limit(limit)
            .all()
        )
        return [self._to_inbox_message(message, listing) for message, listing in rows]

    def unread_count(self, owner_id: int) -> int:
        return (
            self.db.query(func.count(Message.id))
            .filter(Message.owner_user_id == owner_id, Message.read_at.is_(None))
            .scalar()
            or 0
        )

    def get_message(self, message_id: int, user_id: int) -> Message:
        """A message visible to ``user_id`` as its sender or recipient."""
        message = self.db.get(Message, message_id)
        if message is None or user_id not in (message.sender_user_id, message.owner_user_id):
            raise NotFoundError("Message", message_id)
        return message

    def mark_as_read(
        self, message_id: int, owner_id: int, now: datetime | None = None
    ) -> Message:
        """Set ``read_at`` once; later calls keep the first value."""
        try:
            (
                self.db.query(Message)
                .filter(
                    Message.id == message_id,
                    Message.owner_user_id == owner_id,
                    Message.read_at.is_(None),
                )
                .update({Message.read_at: now or datetime.now(timezone.utc)}, synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to mark message {message_id} as read: {e}")
            raise DatabaseError("Failed to mark message as read") from e

        message = (
            self.db.query(Message)
            .filter(Message.id == message_id, Message.owner_user_id == owner_id)
            .populate_existing()
            .first()
        )
        if message is None:
            raise NotFoundError("Message", message_id)
        return message

    @staticmethod
    def _to_inbox_message(message: Message, listing: Listing | None) -> InboxMessage:
        if listing is None or not listing.is_visible_to(message.owner_user_id):
            title = UNKNOWN_LISTING_TITLE
        else:
            title = listing.title
        return InboxMessage(
            id=message.id,
            listing_id=message.listing_id,
            sender_user_id=message.sender_user_id,
            body=message.body,
            created_at=message.created_at,
            read_at=message.read_at,
            listing_title=title,
        )
