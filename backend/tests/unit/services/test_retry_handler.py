"""Tests for the exponential backoff retry helper."""

from unittest.mock import AsyncMock, patch

import pytest

from dwell.services.retry_handler import RetryHandler


class TransientError(Exception):
    pass


async def test_returns_first_success():
    func = AsyncMock(return_value="ok")

    result = await RetryHandler.with_retry(func, "a", key="b")

    assert result == "ok"
    func.assert_awaited_once_with("a", key="b")


async def test_retries_with_backoff():
    func = AsyncMock(side_effect=[TransientError("1"), TransientError("2"), "ok"])

    with patch("asyncio.sleep", new=AsyncMock()) as sleep:
        result = await RetryHandler.with_retry(func, max_retries=3, delay=1.0, backoff=2.0)

    assert result == "ok"
    assert [c.args[0] for c in sleep.await_args_list] == [1.0, 2.0]


async def test_raises_last_error_after_all_attempts():
    func = AsyncMock(side_effect=[TransientError("first"), TransientError("last")])

    with patch("asyncio.sleep", new=AsyncMock()):
        with pytest.raises(TransientError, match="last"):
            await RetryHandler.with_retry(func, max_retries=2)

    assert func.await_count == 2


async def test_unlisted_errors_are_not_retried():
    func = AsyncMock(side_effect=ValueError("bad input"))

    with pytest.raises(ValueError):
        await RetryHandler.with_retry(func, max_retries=3, retry_on=(TransientError,))

    assert func.await_count == 1


async def test_backoff_capped_at_max_delay():
    func = AsyncMock(
        side_effect=[TransientError("1"), TransientError("2"), TransientError("3"), "ok"]
    )

    with patch("asyncio.sleep", new=AsyncMock()) as sleep:
        await RetryHandler.with_retry(
            func, max_retries=4, delay=2.0, backoff=3.0, max_delay=5.0
        )

    assert [c.args[0] for c in sleep.await_args_list] == [2.0, 5.0, 5.0]
