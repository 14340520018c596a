r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that executes a
unit of work with automatic retries, using ``asyncio.sleep`` between
attempts so other tasks can run during the wait.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import inspect
from typing import TYPE_CHECKING, Any

from simpleretry.callbacks import invoke_callback_async
from simpleretry.retry.executor_core import Attempt, Notify, Sleep, iter_retry_steps

if TYPE_CHECKING:
    from collections.abc import Callable

    from simpleretry.config import RetryConfig


class AsyncRetryExecutor:
    """Executes a unit of work with automatic retry logic in asyncio.

    It runs exactly the same retry flow as ``RetryExecutor``: same
    number of attempts, same exception type filtering and same callback
    ordering. Only the way work, callbacks and waits are performed
    differs.

    Attributes:
        config: Retry configuration.

    Example:
        ```pycon
        >>> import asyncio
        >>> from simpleretry.config import RetryConfig
        >>> from simpleretry.retry import AsyncRetryExecutor
        >>> async def fetch():
        ...     return 42
        ...
        >>> executor = AsyncRetryExecutor(RetryConfig(retry_interval=0.01, max_retries=2))
        >>> asyncio.run(executor.execute(fetch))
        42

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config

    async def execute(self, work: Callable[[], Any]) -> Any:
        """Execute the work with automatic retry logic.

        Note:
            ``work`` is normally a coroutine function. A callable returning
            a plain value is accepted too; its value is used as is, but the
            call runs on the event loop thread.

        Args:
            work: Zero-argument callable to attempt. Its result is awaited
                when it is awaitable.

        Returns:
            The value produced by the first successful attempt.

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
                        result = work()
                        if inspect.isawaitable(result):
                            result = await result
                    except Exception as exc:  # noqa: BLE001
                        step = steps.send(exc)
                    else:
                        return result
                elif isinstance(step, Notify):
                    await invoke_callback_async(step.callback, step.error)
                    step = next(steps)
                elif isinstance(step, Sleep):
                    await asyncio.sleep(step.seconds)
                    step = next(steps)
                else:
                    raise step.error
        finally:
            steps.close()
