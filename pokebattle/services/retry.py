"""
Retry with exponential backoff.

Attempt indices run 0..max_attempts-1. A failed attempt is followed by
a wait of base_delay * 2**attempt, except the last one: once the final
attempt fails there is nothing left to wait for. With the defaults that
is 0.6s then 1.2s, two waits for three attempts.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from pokebattle.config import settings
from pokebattle.models.failure import RetryExhaustedError, TransientNetworkError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def backoff_delay(attempt: int, base_delay: float | None = None) -> float:
    """
    Delay in seconds to wait after a failed attempt.

    Args:
        attempt: Zero-based index of the attempt that failed
        base_delay: Delay after the first failure. Defaults to settings.backoff_base_seconds.
    """
    if base_delay is None:
        base_delay = settings.backoff_base_seconds
    return base_delay * (2**attempt)


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    *,
    max_attempts: int | None = None,
    base_delay: float | None = None,
    retry_on: tuple[type[Exception], ...] = (TransientNetworkError,),
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """
    Run an async operation until it succeeds or attempts run out.

    Args:
        operation: Zero-argument callable returning a fresh awaitable per attempt
        max_attempts: Total attempts allowed. Defaults to settings.max_attempts.
        base_delay: Backoff base in seconds. Defaults to settings.backoff_base_seconds.
        retry_on: Exception types that count as retryable failures
        sleep: Awaitable delay function, replaceable in tests

    Returns:
        Result of the first successful attempt

    Raises:
        RetryExhaustedError: If every attempt failed with a retryable error
        ValueError: If max_attempts is less than 1
        Exception: Any non-retryable error, immediately
    """
    if max_attempts is None:
        max_attempts = settings.max_attempts
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    last_error: Exception | None = None

    for attempt in range(max_attempts):
        try:
            return await operation()
        except retry_on as e:
            last_error = e
            if attempt == max_attempts - 1:
                logger.warning("Attempt %d/%d failed: %s", attempt + 1, max_attempts, e)
                break

            delay = backoff_delay(attempt, base_delay)
            logger.warning(
                "Attempt %d/%d failed: %s; retrying in %.1fs",
                attempt + 1,
                max_attempts,
                e,
                delay,
            )
            await sleep(delay)

    raise RetryExhaustedError(max_attempts, last_error) from last_error
