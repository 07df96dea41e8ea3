"""Tests for the inbox view."""

from datetime import datetime, timezone

from dwell.client.api import DwellAPIError
from dwell.client.inbox import Inbox
from dwell.schemas.message import MessageResponse

READ_AT = datetime(2026, 3, 15, 9, 0, tzinfo=timezone.utc)


async def test_load_and_unread_badge(session, api, inbox_message):
    api.list_inbox.return_value = [inbox_message(3), inbox_message(2), inbox_message(1, read=True)]
    api.get_unread_count.return_value = 2
    inbox = Inbox(session)

    rows = await inbox.load()

    assert [r.message.id for r in rows] == [3, 2, 1]
    assert inbox.unread_count == 2
    assert inbox.unread_badge == "2 unread messages"
    assert rows[0].listing_url == "/listing/10"
    api.list_inbox.assert_awaited_once_with(skip=0, limit=50)


async def test_singular_badge_and_no_badge(session, api, inbox_message):
    inbox = Inbox(session)
    api.list_inbox.return_value = [inbox_message(1)]
    api.get_unread_count.return_value = 1
    await inbox.load()
    assert inbox.unread_badge == "1 unread message"

    api.list_inbox.return_value = [inbox_message(1, read=True)]
    api.get_unread_count.return_value = 0
    await inbox.load()
    assert inbox.unread_badge is None


async def test_badge_counts_unread_beyond_loaded_page(session, api, inbox_message):
    api.list_inbox.return_value = [inbox_message(i) for i in range(60, 10, -1)]
    api.get_unread_count.return_value = 60
    api.mark_message_read.return_value = MessageResponse(
        id=60,
        listing_id=10,
        sender_user_id=2,
        owner_user_id=1,
        body="Message 60",
        created_at=READ_AT,
        read_at=READ_AT,
    )
    inbox = Inbox(session, page_size=50)

    rows = await inbox.load()

    assert len(rows) == 50
    assert inbox.unread_badge == "60 unread messages"

    await inbox.mark_as_read(60)
    await inbox.mark_as_read(60)

    assert inbox.unread_count == 59


async def test_unread_count_failure_counts_loaded_page(session, api, inbox_message):
    api.list_inbox.return_value = [inbox_message(2), inbox_message(1, read=True)]
    api.get_unread_count.side_effect = DwellAPIError("offline")
    inbox = Inbox(session)

    await inbox.load()

    assert inbox.unread_count == 1
    assert inbox.is_loading is False


async def test_mark_as_read_uses_server_timestamp(session, api, inbox_message):
    api.list_inbox.return_value = [inbox_message(1)]
    api.get_unread_count.return_value = 1
    api.mark_message_read.return_value = MessageResponse(
        id=1,
        listing_id=10,
        sender_user_id=2,
        owner_user_id=1,
        body="Message 1",
        created_at=READ_AT,
        read_at=READ_AT,
    )
    inbox = Inbox(session)
    await inbox.load()

    assert await inbox.mark_as_read(1) is True

    assert inbox.row(1).message.read_at == READ_AT
    assert inbox.unread_count == 0
    assert session.toaster.last.title == "Message Marked as Read"


async def test_mark_as_read_failure_keeps_row_unread(session, api, inbox_message):
    api.list_inbox.return_value = [inbox_message(1)]
    api.mark_message_read.side_effect = DwellAPIError("offline")
    inbox = Inbox(session)
    await inbox.load()

    assert await inbox.mark_as_read(1) is False

    assert not inbox.row(1).is_read
    assert session.toaster.last.description == "Failed to mark message as read."


async def test_load_failure_toast(session, api):
    api.list_inbox.side_effect = DwellAPIError("offline")
    inbox = Inbox(session)

    assert await inbox.load() == []

    assert inbox.is_loading is False
    assert session.toaster.last.title == "Error Loading Messages"


async def test_anonymous_inbox_is_empty(anonymous_session, api):
    inbox = Inbox(anonymous_session)

    assert await inbox.load() == []
    api.list_inbox.assert_not_awaited()


async def test_row_actions_target_sender(session, api, inbox_message):
    api.list_inbox.return_value = [inbox_message(1, listing_id=None)]
    inbox = Inbox(session)
    row = (await inbox.load())[0]

    assert row.listing_url is None
    assert row.block_button.target_user_id == 2
    dialog = row.report_sender()
    assert dialog.reported_user_id == 2
    assert dialog.report_type == "user"
