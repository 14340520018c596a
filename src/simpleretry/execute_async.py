r"""Implement a function to execute an async unit of work with automatic
retry logic."""

from __future__ import annotations

__all__ = ["execute_async"]

from typing import TYPE_CHECKING, Any

from simpleretry.config import RetryConfig
from simpleretry.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import timedelta

    from simpleretry.exceptions import RetryExhaustedError


async def execute_async(
    work: Callable[[], Any],
    retry_interval: float | timedelta,
    max_retries: int,
    *exception_types: type[Exception],
    on_every_failure: Callable[[Exception], Any] | None = None,
    on_final_failure: Callable[[RetryExhaustedError], Any] | None = None,
) -> Any:
    """Execute an async unit of work with automatic retry logic.

    This is the asyncio counterpart of ``execute``: the waits between
    attempts use ``asyncio.sleep`` and callbacks may be coroutine
    functions.

    Args:
        work: Zero-argument callable returning an awaitable, typically a
            coroutine function.
        retry_interval: Interval waited between two attempts, in seconds
            or as a ``timedelta``. Must be >= 0.
        max_retries: Maximum number of retries after the initial attempt.
            Must be >= 0.
        *exception_types: Exception types to retry (subclasses included).
            When none is given, every ``Exception`` is retried.
        on_every_failure: Optional sync or async callback invoked with the
            exception of every failed attempt.
        on_final_failure: Optional sync or async callback invoked with the
            ``RetryExhaustedError`` before it is raised.

    Returns:
        The value produced by the first successful attempt.

    Raises:
        RetryConfigurationError: If a parameter is invalid. The work is
            not attempted.
        RetryExhaustedError: If every attempt failed with a handled
            exception type.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from simpleretry import execute_async
        >>> from simpleretry.presets import HTTPX_TRANSIENT_ERRORS
        >>> async def fetch():
        ...     async with httpx.AsyncClient() as client:
        ...         return await client.get("https://api.example.com/data")
        ...
        >>> response = asyncio.run(
        ...     execute_async(fetch, 0.5, 3, *HTTPX_TRANSIENT_ERRORS)
        ... )  # doctest: +SKIP

        ```
    """
    config = RetryConfig(
        retry_interval=retry_interval,
        max_retries=max_retries,
        exception_types=exception_types,
        on_every_failure=on_every_failure,
        on_final_failure=on_final_failure,
    )
    return await AsyncRetryExecutor(config).execute(work)
