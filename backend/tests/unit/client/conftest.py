"""Fixtures for the client SDK views."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from dwell.client.api import DwellAPI
from dwell.client.session import SessionContext
from dwell.schemas.message import InboxMessage, MessageCreated
from dwell.schemas.notification import NotificationResult

CREATED = datetime(2026, 3, 14, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def api():
    """API double; coroutine methods become AsyncMocks via spec=DwellAPI."""
    api = MagicMock(spec=DwellAPI)
    api.token = "token"
    api.get_remaining_quota.return_value = 5
    api.is_blocked.return_value = False
    api.get_unread_count.return_value = 0
    api.insert_message.return_value = MessageCreated(id=100, created_at=CREATED)
    api.dispatch_notification.return_value = NotificationResult(success=True, email_id="e1")
    return api


@pytest.fixture
def session(api):
    return SessionContext(api, user_id=1, user_label="Alice", location="/listing/10")


@pytest.fixture
def anonymous_session(api):
    return SessionContext(api, location="/listing/10")


@pytest.fixture
def inbox_message():
    def _inbox_message(message_id: int, read: bool = False, listing_id: int | None = 10):
        return InboxMessage(
            id=message_id,
            listing_id=listing_id,
            sender_user_id=2,
            body=f"Message {message_id}",
            created_at=CREATED,
            read_at=CREATED if read else None,
            listing_title="Sunny 2BHK near the park",
        )

    return _inbox_message
