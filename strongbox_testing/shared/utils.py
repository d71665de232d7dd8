"""General-purpose polling helpers for tests."""

import logging
import time
from typing import Callable, TypeVar

from strongbox_testing.constants import DEFAULT_SLEEP_MILLIS, DEFAULT_TIMEOUT_MILLIS

I = TypeVar("I")

logger = logging.getLogger(__name__)


def _elapsed_millis(started: float) -> float:
    return (time.monotonic() - started) * 1000


def poll_until_success(
    operation: Callable[[I], bool],
    argument: I,
    timeout_millis: int,
    sleep_millis: int,
) -> bool:
    """
    Call ``operation(argument)`` until it returns True or *timeout_millis* elapses.

    The first call happens immediately and a success there returns without
    sleeping. Every retry is followed by a pause of *sleep_millis*, and the
    elapsed time is only checked before a retry, so the total wall time may
    exceed *timeout_millis* by one pause plus one call of *operation*.

    Returns the result of the last call. Exceptions raised by *operation* or
    while sleeping (e.g. ``KeyboardInterrupt``) propagate to the caller.
    """
    if timeout_millis < 0:
        raise ValueError(f"timeout_millis must be non-negative, got {timeout_millis}")
    if sleep_millis < 0:
        raise ValueError(f"sleep_millis must be non-negative, got {sleep_millis}")

    started = time.monotonic()
    result = bool(operation(argument))
    attempts = 1
    while _elapsed_millis(started) < timeout_millis and not result:
        logger.debug("attempt %d on %r failed, retrying", attempts, argument)
        result = bool(operation(argument))
        attempts += 1
        time.sleep(sleep_millis / 1000)

    if not result:
        logger.info(
            "operation on %r did not succeed after %d attempts in %.0f ms",
            argument,
            attempts,
            _elapsed_millis(started),
        )
    return result


def wait_until(
    operation: Callable[[I], bool],
    argument: I,
    description: str,
    timeout_millis: int = DEFAULT_TIMEOUT_MILLIS,
    sleep_millis: int = DEFAULT_SLEEP_MILLIS,
) -> None:
    """Like `poll_until_success`, but fails the test when the operation never succeeds."""
    if not poll_until_success(operation, argument, timeout_millis, sleep_millis):
        raise AssertionError(f"timed out waiting for {description}")
