"""Tests for retry with exponential backoff."""

from unittest.mock import AsyncMock

import pytest

from pokebattle.models.failure import RetryExhaustedError, TransientNetworkError
from pokebattle.services.retry import backoff_delay, retry_with_backoff


def _flaky(failures: int, result: str = "ok") -> AsyncMock:
    """Operation that fails `failures` times, then returns result."""
    effects: list[object] = [TransientNetworkError(f"failure {i}") for i in range(failures)]
    effects.append(result)
    return AsyncMock(side_effect=effects)


class TestBackoffDelay:
    def test_doubles_per_attempt(self) -> None:
        """600ms, 1200ms, 2400ms."""
        assert backoff_delay(0, 0.6) == pytest.approx(0.6)
        assert backoff_delay(1, 0.6) == pytest.approx(1.2)
        assert backoff_delay(2, 0.6) == pytest.approx(2.4)

    def test_default_base_from_settings(self) -> None:
        """Default base delay is 600ms."""
        assert backoff_delay(0) == pytest.approx(0.6)


class TestRetryWithBackoff:
    async def test_first_attempt_success(self, recorded_sleep: AsyncMock) -> None:
        """Success on the first attempt never waits."""
        operation = _flaky(0)

        result = await retry_with_backoff(operation, sleep=recorded_sleep)

        assert result == "ok"
        assert operation.await_count == 1
        recorded_sleep.assert_not_awaited()

    async def test_success_on_last_attempt(self, recorded_sleep: AsyncMock) -> None:
        """Failures on attempts 0 and 1 wait 600ms then 1200ms."""
        operation = _flaky(2, result="third time")

        result = await retry_with_backoff(operation, sleep=recorded_sleep)

        assert result == "third time"
        assert operation.await_count == 3
        delays = [c.args[0] for c in recorded_sleep.await_args_list]
        assert delays == pytest.approx([0.6, 1.2])

    async def test_short_circuits_after_success(self, recorded_sleep: AsyncMock) -> None:
        """No attempts are made after the first success."""
        operation = _flaky(1)

        await retry_with_backoff(operation, sleep=recorded_sleep)

        assert operation.await_count == 2
        assert recorded_sleep.await_count == 1

    async def test_exhaustion_waits_twice_for_three_attempts(
        self, recorded_sleep: AsyncMock
    ) -> None:
        """The last failed attempt does not wait."""
        operation = _flaky(3)

        with pytest.raises(RetryExhaustedError) as exc_info:
            await retry_with_backoff(operation, sleep=recorded_sleep)

        assert operation.await_count == 3
        assert recorded_sleep.await_count == 2
        total_wait = sum(c.args[0] for c in recorded_sleep.await_args_list)
        assert total_wait == pytest.approx(1.8)
        assert exc_info.value.attempts == 3
        assert str(exc_info.value.last_error) == "failure 2"

    async def test_custom_policy(self, recorded_sleep: AsyncMock) -> None:
        """Attempts and base delay can be overridden."""
        operation = _flaky(5)

        with pytest.raises(RetryExhaustedError):
            await retry_with_backoff(
                operation, max_attempts=4, base_delay=0.1, sleep=recorded_sleep
            )

        assert operation.await_count == 4
        delays = [c.args[0] for c in recorded_sleep.await_args_list]
        assert delays == pytest.approx([0.1, 0.2, 0.4])

    async def test_single_attempt_never_waits(self, recorded_sleep: AsyncMock) -> None:
        """With one attempt there is nothing to wait for."""
        with pytest.raises(RetryExhaustedError):
            await retry_with_backoff(_flaky(1), max_attempts=1, sleep=recorded_sleep)

        recorded_sleep.assert_not_awaited()

    async def test_non_retryable_error_propagates(self, recorded_sleep: AsyncMock) -> None:
        """Errors outside retry_on are raised immediately."""
        operation = AsyncMock(side_effect=KeyError("boom"))

        with pytest.raises(KeyError):
            await retry_with_backoff(operation, sleep=recorded_sleep)

        assert operation.await_count == 1
        recorded_sleep.assert_not_awaited()

    async def test_rejects_zero_attempts(self) -> None:
        """At least one attempt is required."""
        with pytest.raises(ValueError, match="at least 1"):
            await retry_with_backoff(_flaky(0), max_attempts=0)

    async def test_real_sleep_waits(self) -> None:
        """Default sleep really waits between attempts."""
        import time

        operation = _flaky(2)
        started = time.monotonic()

        await retry_with_backoff(operation, base_delay=0.01)

        assert time.monotonic() - started >= 0.02
