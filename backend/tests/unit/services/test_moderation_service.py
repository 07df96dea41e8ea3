"""Tests for moderator actions."""

from datetime import datetime, timezone

import pytest

from dwell.core.exceptions import NotFoundError
from dwell.services.moderation_service import ModerationService

NOW = datetime(2026, 3, 14, 15, 30, tzinfo=timezone.utc)


def test_suspend_and_reinstate_user(db, sender):
    service = ModerationService(db)

    suspended = service.set_user_suspension(sender.id, True, NOW)
    assert suspended.is_suspended

    reinstated = service.set_user_suspension(sender.id, False)
    assert not reinstated.is_suspended


def test_suspending_twice_keeps_first_timestamp(db, sender):
    service = ModerationService(db)
    first = service.set_user_suspension(sender.id, True, NOW).suspended_at

    again = service.set_user_suspension(sender.id, True, datetime.now(timezone.utc))

    assert again.suspended_at == first


def test_suspend_unknown_user(db):
    with pytest.raises(NotFoundError):
        ModerationService(db).set_user_suspension(404, True)


def test_hide_and_soft_delete_listing(db, listing):
    service = ModerationService(db)

    hidden = service.moderate_listing(listing.id, is_public=False)
    assert hidden.is_public is False
    assert not hidden.is_removed

    deleted = service.moderate_listing(listing.id, soft_delete=True, now=NOW)
    assert deleted.is_removed

    restored = service.moderate_listing(listing.id, soft_delete=False)
    assert not restored.is_removed
    assert restored.is_public is False


def test_moderate_unknown_listing(db):
    with pytest.raises(NotFoundError):
        ModerationService(db).moderate_listing(404, is_public=False)
