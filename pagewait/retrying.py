"""Polling assertion primitives for pages that update asynchronously.

Every primitive evaluates a predicate immediately and then at a fixed
interval until it has an answer or the timeout budget runs out. Failures are
returned as a PollOutcome rather than raised; the expect_* forms raise
TimeoutExceeded for direct use in tests.
"""

import asyncio
import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Coroutine

from .constants import DEFAULT_POLL_INTERVAL


class InvalidConfiguration(ValueError):
    """A timeout or poll interval that cannot drive a poll loop."""


class TimeoutExceeded(AssertionError):
    """A polled condition did not hold within its timeout budget."""

    def __init__(self, message: str, outcome: "PollOutcome"):
        super().__init__(message)
        self.outcome = outcome


@dataclass(frozen=True)
class PollOutcome:
    succeeded: bool
    elapsed: float
    poll_count: int
    last_error: AssertionError | None = None

    def describe(self) -> str:
        status = "succeeded" if self.succeeded else "failed"
        text = f"{status} after {self.elapsed:.3f}s ({self.poll_count} polls)"
        if self.last_error is not None:
            text += f", last error: {self.last_error}"
        return text

    def raise_for_failure(self, description: str = "Condition") -> "PollOutcome":
        """Raise TimeoutExceeded if the poll loop failed, else return self."""
        if not self.succeeded:
            raise TimeoutExceeded(f"{description} {self.describe()}", self)
        return self


def validate_budget(timeout: float, poll_interval: float) -> None:
    if not math.isfinite(timeout) or timeout < 0:
        raise InvalidConfiguration(f"timeout must be finite and >= 0, got {timeout}")
    if not math.isfinite(poll_interval) or poll_interval <= 0:
        raise InvalidConfiguration(
            f"poll_interval must be finite and > 0, got {poll_interval}"
        )


def _poll(
    predicate: Callable[[], bool],
    timeout: float,
    poll_interval: float,
) -> tuple[bool, int, float]:
    """Evaluate predicate until it returns True or the budget is spent.

    Returns (observed_true, poll_count, elapsed_seconds). The last sleep is cut
    short so the final poll lands on the deadline.
    """
    validate_budget(timeout, poll_interval)
    start = time.monotonic()
    poll_count = 0
    while True:
        poll_count += 1
        if predicate():
            return True, poll_count, time.monotonic() - start
        elapsed = time.monotonic() - start
        if elapsed >= timeout:
            return False, poll_count, elapsed
        time.sleep(min(poll_interval, timeout - elapsed))


def _log_outcome(kind: str, outcome: PollOutcome) -> PollOutcome:
    if outcome.succeeded:
        logging.debug(f"{kind} {outcome.describe()}")
    else:
        logging.info(f"{kind} {outcome.describe()}")
    return outcome


def assert_eventually(
    predicate: Callable[[], bool],
    timeout: float,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
) -> PollOutcome:
    """Poll predicate until it returns True or the timeout budget runs out."""
    stopped, poll_count, elapsed = _poll(predicate, timeout, poll_interval)
    return _log_outcome(
        "assert_eventually", PollOutcome(stopped, elapsed, poll_count)
    )


def assert_never(
    predicate: Callable[[], bool],
    timeout: float,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
) -> PollOutcome:
    """Poll predicate for the whole budget, failing on the first True.

    A success always costs the full timeout; a failure returns as soon as
    the predicate is observed True.
    """
    stopped, poll_count, elapsed = _poll(predicate, timeout, poll_interval)
    return _log_outcome(
        "assert_never", PollOutcome(not stopped, elapsed, poll_count)
    )


def retry_check(
    check: Callable[[], None],
    timeout: float,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
) -> PollOutcome:
    """Retry an assertion until it passes or the timeout budget runs out.

    The check function should raise AssertionError on failure. Any other
    exception propagates.
    """
    errors: list[AssertionError] = []

    def _passes() -> bool:
        try:
            check()
        except AssertionError as e:
            errors.append(e)
            return False
        return True

    stopped, poll_count, elapsed = _poll(_passes, timeout, poll_interval)
    last_error = errors[-1] if errors and not stopped else None
    return _log_outcome(
        "retry_check", PollOutcome(stopped, elapsed, poll_count, last_error)
    )


def expect_eventually(
    predicate: Callable[[], bool],
    timeout: float,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    message: str = "Condition not met within timeout:",
) -> PollOutcome:
    return assert_eventually(predicate, timeout, poll_interval).raise_for_failure(
        message
    )


def expect_never(
    predicate: Callable[[], bool],
    timeout: float,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    message: str = "Condition unexpectedly met:",
) -> PollOutcome:
    return assert_never(predicate, timeout, poll_interval).raise_for_failure(
        message
    )


async def _async_poll(
    predicate: Callable[[], Coroutine[Any, Any, bool]],
    timeout: float,
    poll_interval: float,
) -> tuple[bool, int, float]:
    validate_budget(timeout, poll_interval)
    loop = asyncio.get_running_loop()
    start = loop.time()
    poll_count = 0
    while True:
        poll_count += 1
        if await predicate():
            return True, poll_count, loop.time() - start
        elapsed = loop.time() - start
        if elapsed >= timeout:
            return False, poll_count, elapsed
        await asyncio.sleep(min(poll_interval, timeout - elapsed))


async def async_assert_eventually(
    predicate: Callable[[], Coroutine[Any, Any, bool]],
    timeout: float,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
) -> PollOutcome:
    """Poll an async predicate until it returns True or timeout."""
    stopped, poll_count, elapsed = await _async_poll(
        predicate, timeout, poll_interval
    )
    return _log_outcome(
        "async_assert_eventually", PollOutcome(stopped, elapsed, poll_count)
    )


async def async_assert_never(
    predicate: Callable[[], Coroutine[Any, Any, bool]],
    timeout: float,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
) -> PollOutcome:
    """Poll an async predicate for the whole budget, failing on the first True."""
    stopped, poll_count, elapsed = await _async_poll(
        predicate, timeout, poll_interval
    )
    return _log_outcome(
        "async_assert_never", PollOutcome(not stopped, elapsed, poll_count)
    )
