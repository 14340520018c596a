r"""Implement a function to execute a unit of work with automatic retry
logic."""

from __future__ import annotations

__all__ = ["execute"]

from typing import TYPE_CHECKING, Any, TypeVar

from simpleretry.config import RetryConfig
from simpleretry.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import timedelta

    from simpleretry.exceptions import RetryExhaustedError

T = TypeVar("T")


def execute(
    work: Callable[[], T],
    retry_interval: float | timedelta,
    max_retries: int,
    *exception_types: type[Exception],
    on_every_failure: Callable[[Exception], Any] | None = None,
    on_final_failure: Callable[[RetryExhaustedError], Any] | None = None,
) -> T:
    """Execute a unit of work with automatic retry logic.

    The work is attempted up to ``max_retries + 1`` times. After each
    failed attempt, except the last one, the calling thread sleeps for
    ``retry_interval``.

    Args:
        work: Zero-argument callable to attempt.
        retry_interval: Interval waited between two attempts, in seconds
            or as a ``timedelta``. Must be >= 0.
        max_retries: Maximum number of retries after the initial attempt.
            Must be >= 0.
        *exception_types: Exception types to retry (subclasses included).
            When none is given, every ``Exception`` is retried. Any other
            exception is re-raised immediately, unchanged.
        on_every_failure: Optional callback invoked with the exception of
            every failed attempt, including unhandled ones.
        on_final_failure: Optional callback invoked with the
            ``RetryExhaustedError`` before it is raised.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        RetryConfigurationError: If a parameter is invalid. The work is
            not attempted.
        RetryExhaustedError: If every attempt failed with a handled
            exception type. It wraps every failure in attempt order.

    Example:
        ```pycon
        >>> from simpleretry import execute
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 2:
        ...         raise ConnectionError("not yet")
        ...     return "done"
        ...
        >>> execute(flaky, retry_interval=0.01, max_retries=2)
        'done'
        >>> len(calls)
        2

        ```
    """
    config = RetryConfig(
        retry_interval=retry_interval,
        max_retries=max_retries,
        exception_types=exception_types,
        on_every_failure=on_every_failure,
        on_final_failure=on_final_failure,
    )
    return RetryExecutor(config).execute(work)
