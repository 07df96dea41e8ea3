"""Exponential backoff for outbound calls such as email delivery."""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryHandler:
    @staticmethod
    async def with_retry(
        func: Callable[..., Coroutine[Any, Any, T]],
        *args: Any,
        max_retries: int = 3,
        delay: float = 1.0,
        backoff: float = 2.0,
        max_delay: float = 30.0,
        retry_on: tuple[type[Exception], ...] = (Exception,),
        **kwargs: Any,
    ) -> T:
        """Await ``func`` up to ``max_retries`` times.

        Only exceptions in ``retry_on`` earn another attempt; anything else
        propagates at once. The wait before attempt ``n + 1`` is
        ``delay * backoff**n`` capped at ``max_delay``. The last error is
        re-raised once attempts run out.
        """
        name = getattr(func, "__name__", repr(func))

        for attempt in range(1, max_retries + 1):
            try:
                return await func(*args, **kwargs)
            except retry_on as e:
                if attempt == max_retries:
                    logger.error(f"{name} failed after {max_retries} attempts: {e}")
                    raise
                wait_time = min(delay * (backoff ** (attempt - 1)), max_delay)
                logger.warning(
                    f"{name} attempt {attempt}/{max_retries} failed: {e}. "
                    f"Retrying in {wait_time}s"
                )
                await asyncio.sleep(wait_time)

        raise ValueError("max_retries must be at least 1")
