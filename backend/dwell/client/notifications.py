"""Toasts for messages arriving while the app is open."""

import asyncio
import logging
from collections import deque

from dwell.client.api import Subscription
from dwell.client.inbox import INBOX_PATH, listing_path
from dwell.client.session import SessionContext
from dwell.client.toasts import ToastAction
from dwell.schemas.realtime import MessageInsertEvent

logger = logging.getLogger(__name__)

NEW_MESSAGE_TITLE = "New Message Received!"
FALLBACK_DESCRIPTION = "You have a new message about one of your listings."
PREVIEW_LENGTH = 60
TOAST_DURATION_MS = 8000
SEEN_LIMIT = 500


def preview(body: str, length: int = PREVIEW_LENGTH) -> str:
    if len(body) > length:
        return f"{body[:length]}..."
    return body


class NotificationListener:
    """Subscribes to the signed-in user's incoming messages and shows toasts."""

    def __init__(self, session: SessionContext, seen_limit: int = SEEN_LIMIT):
        self.session = session
        self._subscription: Subscription | None = None
        self._seen: deque[int] = deque(maxlen=seen_limit)

    @property
    def is_listening(self) -> bool:
        return self._subscription is not None

    def start(self) -> bool:
        """Subscribe once per session. Returns False when nothing was started."""
        if self._subscription is not None or not self.session.is_authenticated:
            return False
        self._subscription = self.session.api.subscribe_to_incoming_messages(
            self.session.user_id, self.handle_insert
        )
        logger.info(f"Notification listener started for user {self.session.user_id}")
        return True

    async def stop(self) -> None:
        subscription, self._subscription = self._subscription, None
        if subscription is not None:
            await subscription.unsubscribe()
            logger.info("Notification listener stopped")

    async def sign_out(self) -> None:
        await self.stop()
        self.session.sign_out()
        self._seen.clear()

    async def handle_insert(self, event: MessageInsertEvent) -> None:
        row = event.new
        if row.owner_user_id != self.session.user_id or row.id in self._seen:
            return
        self._seen.append(row.id)

        api = self.session.api
        message, listing = await asyncio.gather(
            api.get_message(row.id),
            api.get_listing(row.listing_id) if row.listing_id is not None else _missing(),
            return_exceptions=True,
        )
        inbox_action = ToastAction(label="View Inbox", href=INBOX_PATH)

        if isinstance(message, BaseException) or isinstance(listing, BaseException):
            failure = message if isinstance(message, BaseException) else listing
            logger.error(f"Error processing message notification: {failure}")
            self.session.toaster.show(
                NEW_MESSAGE_TITLE, FALLBACK_DESCRIPTION, actions=[inbox_action]
            )
            return

        self.session.toaster.show(
            NEW_MESSAGE_TITLE,
            f"About: {listing.title}\n{preview(message.body)}",
            actions=[
                ToastAction(
                    label="View Listing", href=listing_path(listing.id), new_tab=True
                ),
                inbox_action,
            ],
            duration_ms=TOAST_DURATION_MS,
        )


async def _missing():
    raise LookupError("Message is not attached to a listing")
