"""Tests for the server-sent events feed."""

from datetime import datetime, timezone

import pytest

from dwell.core.dependencies import get_realtime_broker
from dwell.public.api.v1.realtime import sse_format, sse_retry
from dwell.schemas.realtime import MessageInsertEvent, MessageRow


class FakeBroker:
    def __init__(self, events):
        self.events = events
        self.listened_for = None

    async def listen(self, user_id, heartbeat_seconds=15.0):
        self.listened_for = user_id
        for event in self.events:
            yield event


def test_sse_format():
    assert sse_format('{"a": 1}', event="message") == b'event: message\ndata: {"a": 1}\n\n'
    assert sse_format("x") == b"data: x\n\n"
    assert sse_retry(3000) == b"retry: 3000\n\n"


@pytest.fixture
def fake_broker(owner):
    return FakeBroker(
        [
            None,
            MessageInsertEvent(
                new=MessageRow(
                    id=7,
                    listing_id=1,
                    sender_user_id=99,
                    owner_user_id=owner.id,
                    created_at=datetime(2026, 3, 14, 15, 30, tzinfo=timezone.utc),
                )
            ),
        ]
    )


def test_stream_emits_heartbeat_and_inserts(public_client, auth_headers, owner, fake_broker):
    from dwell.public.main import app

    app.dependency_overrides[get_realtime_broker] = lambda: fake_broker

    response = public_client.get("/api/v1/realtime/messages", headers=auth_headers(owner))

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    assert fake_broker.listened_for == owner.id
    body = response.text
    assert body.startswith("retry: 5000\n\n")
    assert "event: heartbeat\ndata: {}\n\n" in body
    assert "event: message\n" in body
    assert '"owner_user_id":' in body
    assert '"type":"INSERT"' in body


def test_stream_requires_authentication(public_client):
    response = public_client.get("/api/v1/realtime/messages")
    assert response.status_code in (401, 403)
