"""Inbox view of messages received by the signed-in user."""

import logging

from dwell.client.api import DwellAPIError
from dwell.client.blocks import BlockButton
from dwell.client.reports import ReportDialog
from dwell.client.session import SessionContext
from dwell.schemas.message import InboxMessage

logger = logging.getLogger(__name__)

INBOX_PATH = "/inbox"


def listing_path(listing_id: int) -> str:
    return f"/listing/{listing_id}"


class InboxRow:
    """One received message and the actions offered on it.

    Each action fails independently; nothing here touches the other rows.
    """

    def __init__(self, session: SessionContext, message: InboxMessage):
        self.session = session
        self.message = message
        self.block_button = BlockButton(session, message.sender_user_id)

    @property
    def is_read(self) -> bool:
        return self.message.is_read

    @property
    def listing_url(self) -> str | None:
        """Opened in a new tab."""
        if self.message.listing_id is None:
            return None
        return listing_path(self.message.listing_id)

    def report_sender(self) -> ReportDialog:
        return ReportDialog(self.session, reported_user_id=self.message.sender_user_id)


class Inbox:
    """One page of received messages plus the account-wide unread count."""

    def __init__(self, session: SessionContext, page_size: int = 50):
        self.session = session
        self.page_size = page_size
        self.rows: list[InboxRow] = []
        self.is_loading = True
        self._unread: int | None = None

    async def load(self, skip: int = 0) -> list[InboxRow]:
        if not self.session.is_authenticated:
            self.is_loading = False
            return self.rows

        self.is_loading = True
        try:
            messages = await self.session.api.list_inbox(skip=skip, limit=self.page_size)
        except DwellAPIError as e:
            logger.error(f"Error fetching messages: {e}")
            self.session.toaster.error(
                "Error Loading Messages", "Failed to load your messages. Please try again."
            )
            self.is_loading = False
            return self.rows

        self.rows = [InboxRow(self.session, message) for message in messages]
        try:
            self._unread = await self.session.api.get_unread_count()
        except DwellAPIError as e:
            logger.error(f"Error fetching unread count: {e}")
            self._unread = None
        finally:
            self.is_loading = False
        return self.rows

    @property
    def unread_count(self) -> int:
        """Server-side count; the loaded page is counted when it is unknown."""
        if self._unread is not None:
            return self._unread
        return sum(1 for row in self.rows if not row.is_read)

    @property
    def unread_badge(self) -> str | None:
        count = self.unread_count
        if count == 0:
            return None
        return f"{count} unread message{'' if count == 1 else 's'}"

    def row(self, message_id: int) -> InboxRow | None:
        return next((r for r in self.rows if r.message.id == message_id), None)

    async def mark_as_read(self, message_id: int) -> bool:
        """Mark a row read once the server confirms, using its ``read_at``."""
        row = self.row(message_id)
        try:
            confirmed = await self.session.api.mark_message_read(message_id)
        except DwellAPIError as e:
            logger.error(f"Error marking message as read: {e}")
            self.session.toaster.error("Error", "Failed to mark message as read.")
            return False

        if row is not None:
            if not row.is_read and self._unread:
                self._unread -= 1
            row.message = row.message.model_copy(update={"read_at": confirmed.read_at})
        self.session.toaster.show(
            "Message Marked as Read", "The message has been marked as read."
        )
        return True
