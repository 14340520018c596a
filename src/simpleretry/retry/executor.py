r"""Synchronous retry executor.

This module provides the RetryExecutor class that executes a unit of
work with automatic retries, blocking the calling thread between
attempts.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import time
from typing import TYPE_CHECKING, TypeVar

from simpleretry.callbacks import invoke_callback
from simpleretry.retry.executor_core import Attempt, Notify, Sleep, iter_retry_steps

if TYPE_CHECKING:
    from collections.abc import Callable

    from simpleretry.config import RetryConfig

T = TypeVar("T")


class RetryExecutor:
    """Executes a unit of work with automatic retry logic.

    Attempts are made strictly one after the other on the calling
    thread. Between two attempts the thread is blocked with
    ``time.sleep`` for the configured interval.

    Attributes:
        config: Retry configuration.

    Example:
        ```pycon
        >>> from simpleretry.config import RetryConfig
        >>> from simpleretry.retry import RetryExecutor
        >>> executor = RetryExecutor(RetryConfig(retry_interval=0.01, max_retries=2))
        >>> executor.execute(lambda: 42)
        42

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config

    def execute(self, work: Callable[[], T]) -> T:
        """Execute the work with automatic retry logic.

        Args:
            work: Zero-argument callable to attempt.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            RetryExhaustedError: If every attempt failed with a handled
                exception type.
            Exception: The original exception if its type is not one of
                the handled exception types, or any exception raised by a
                callback.
        """
        steps = iter_retry_steps(self.config)
        try:
            step = next(steps)
            while True:
                if isinstance(step, Attempt):
                    try:
                        return work()
                    except Exception as exc:  # noqa: BLE001
                        step = steps.send(exc)
                elif isinstance(step, Notify):
                    invoke_callback(step.callback, step.error)
                    step = next(steps)
                elif isinstance(step, Sleep):
                    time.sleep(step.seconds)
                    step = next(steps)
                else:
                    raise step.error
        finally:
            steps.close()
