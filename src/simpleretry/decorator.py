r"""Decorator to add automatic retry logic to a function."""

from __future__ import annotations

__all__ = ["retry"]

import functools
import inspect
from typing import TYPE_CHECKING, Any

from simpleretry.config import RetryConfig
from simpleretry.retry.executor import RetryExecutor
from simpleretry.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import timedelta

    from simpleretry.exceptions import RetryExhaustedError


def retry(
    retry_interval: float | timedelta,
    max_retries: int,
    *exception_types: type[Exception],
    on_every_failure: Callable[[Exception], Any] | None = None,
    on_final_failure: Callable[[RetryExhaustedError], Any] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Create a decorator that retries the decorated function.

    The parameters are validated when the decorator is created. Each
    call of the decorated function is an independent retry execution.
    Coroutine functions are retried with ``AsyncRetryExecutor``, other
    functions with ``RetryExecutor``.

    Args:
        retry_interval: Interval waited between two attempts, in seconds
            or as a ``timedelta``. Must be >= 0.
        max_retries: Maximum number of retries after the initial attempt.
            Must be >= 0.
        *exception_types: Exception types to retry (subclasses included).
            When none is given, every ``Exception`` is retried.
        on_every_failure: Optional callback invoked with the exception of
            every failed attempt.
        on_final_failure: Optional callback invoked with the
            ``RetryExhaustedError`` before it is raised.

    Returns:
        The decorator.

    Raises:
        RetryConfigurationError: If a parameter is invalid.

    Example:
        ```pycon
        >>> from simpleretry import retry
        >>> @retry(0.01, 2, ZeroDivisionError)
        ... def divide(a, b):
        ...     return a / b
        ...
        >>> divide(6, 3)
        2.0

        ```
    """
    config = RetryConfig(
        retry_interval=retry_interval,
        max_retries=max_retries,
        exception_types=exception_types,
        on_every_failure=on_every_failure,
        on_final_failure=on_final_failure,
    )

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):
            executor_async = AsyncRetryExecutor(config)

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await executor_async.execute(functools.partial(func, *args, **kwargs))

            return async_wrapper

        executor = RetryExecutor(config)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return executor.execute(functools.partial(func, *args, **kwargs))

        return wrapper

    return decorator
