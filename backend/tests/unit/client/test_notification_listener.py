"""Tests for incoming message toasts."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from dwell.client.api import DwellAPIError, Subscription
from dwell.client.notifications import (
    FALLBACK_DESCRIPTION,
    NEW_MESSAGE_TITLE,
    NotificationListener,
    preview,
)
from dwell.schemas.listing import ListingSummary
from dwell.schemas.message import MessageResponse
from dwell.schemas.realtime import MessageInsertEvent, MessageRow

CREATED = datetime(2026, 3, 14, 15, 30, tzinfo=timezone.utc)


def insert(message_id: int = 7, owner_id: int = 1, listing_id: int | None = 10):
    return MessageInsertEvent(
        new=MessageRow(
            id=message_id,
            listing_id=listing_id,
            sender_user_id=2,
            owner_user_id=owner_id,
            created_at=CREATED,
        )
    )


@pytest.fixture
def message_api(api):
    api.get_message.return_value = MessageResponse(
        id=7,
        listing_id=10,
        sender_user_id=2,
        owner_user_id=1,
        body="Is this still available?",
        created_at=CREATED,
        read_at=None,
    )
    api.get_listing.return_value = ListingSummary(
        id=10, title="Sunny 2BHK near the park", owner_user_id=1
    )
    return api


@pytest.fixture
def listener(session, message_api):
    return NotificationListener(session)


def test_preview_truncates():
    assert preview("a" * 60) == "a" * 60
    assert preview("a" * 61) == "a" * 60 + "..."


async def test_toast_with_listing_and_preview(listener, session):
    await listener.handle_insert(insert())

    toast = session.toaster.last
    assert toast.title == NEW_MESSAGE_TITLE
    assert toast.description == "About: Sunny 2BHK near the park\nIs this still available?"
    assert toast.duration_ms == 8000
    assert [(a.label, a.href, a.new_tab) for a in toast.actions] == [
        ("View Listing", "/listing/10", True),
        ("View Inbox", "/inbox", False),
    ]


async def test_long_body_preview(listener, session, api):
    api.get_message.return_value = api.get_message.return_value.model_copy(
        update={"body": "x" * 80}
    )

    await listener.handle_insert(insert())

    assert session.toaster.last.description.endswith("\n" + "x" * 60 + "...")


async def test_duplicate_insert_toasted_once(listener, session):
    await listener.handle_insert(insert())
    await listener.handle_insert(insert())

    assert len(session.toaster.toasts) == 1


async def test_seen_ids_are_bounded(session, message_api):
    listener = NotificationListener(session, seen_limit=2)

    for message_id in (7, 8, 9):
        await listener.handle_insert(insert(message_id))
    await listener.handle_insert(insert(9))
    await listener.handle_insert(insert(7))

    assert len(session.toaster.toasts) == 4


async def test_other_owner_ignored(listener, session, api):
    await listener.handle_insert(insert(owner_id=99))

    assert not session.toaster.toasts
    api.get_message.assert_not_awaited()


@pytest.mark.parametrize("failing", ["get_message", "get_listing"])
async def test_fetch_failure_shows_fallback(listener, session, api, failing):
    getattr(api, failing).side_effect = DwellAPIError("offline")

    await listener.handle_insert(insert())

    toast = session.toaster.last
    assert toast.description == FALLBACK_DESCRIPTION
    assert [a.label for a in toast.actions] == ["View Inbox"]


async def test_message_without_listing_shows_fallback(listener, session, api):
    await listener.handle_insert(insert(listing_id=None))

    assert session.toaster.last.description == FALLBACK_DESCRIPTION
    api.get_listing.assert_not_awaited()


async def test_start_once_and_stop(listener, session, api):
    subscription = MagicMock(spec=Subscription)
    api.subscribe_to_incoming_messages.return_value = subscription

    assert listener.start() is True
    assert listener.start() is False
    api.subscribe_to_incoming_messages.assert_called_once_with(1, listener.handle_insert)

    await listener.stop()
    subscription.unsubscribe.assert_awaited_once()
    assert not listener.is_listening


async def test_anonymous_does_not_subscribe(anonymous_session, api):
    listener = NotificationListener(anonymous_session)

    assert listener.start() is False
    api.subscribe_to_incoming_messages.assert_not_called()


async def test_sign_out_stops_and_resets(listener, session, api):
    api.subscribe_to_incoming_messages.return_value = MagicMock(spec=Subscription)
    listener.start()
    await listener.handle_insert(insert())

    await listener.sign_out()

    assert not listener.is_listening
    assert not session.is_authenticated
    assert session.api.token is None
