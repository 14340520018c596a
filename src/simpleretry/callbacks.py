r"""Callback invocation utilities for retry lifecycle events.

The executors notify two observers: ``on_every_failure`` after each
failed attempt, and ``on_final_failure`` once every attempt failed.
Exceptions raised by a callback propagate to the caller.
"""

from __future__ import annotations

__all__ = ["invoke_callback", "invoke_callback_async"]

import inspect
from typing import TYPE_CHECKING, Any

from simpleretry.exceptions import RetryConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable


def invoke_callback(callback: Callable[[Any], Any] | None, error: Exception) -> None:
    """Invoke a callback with an error if the callback is provided.

    Only plain functions are supported: the synchronous executor has no
    event loop to await a coroutine function.

    Args:
        callback: Optional callback accepting the error.
        error: The error passed to the callback.

    Raises:
        RetryConfigurationError: If the callback returns an awaitable.
    """
    if callback is None:
        return
    result = callback(error)
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        msg = (
            "callbacks of the synchronous executor must not return an awaitable, "
            f"got {type(result).__name__}; use execute_async for async callbacks"
        )
        raise RetryConfigurationError(msg)


async def invoke_callback_async(callback: Callable[[Any], Any] | None, error: Exception) -> None:
    """Invoke a sync or async callback with an error if it is provided.

    The callback may be a plain function or a coroutine function. When
    it returns an awaitable, the awaitable is awaited before returning.

    Args:
        callback: Optional callback accepting the error.
        error: The error passed to the callback.
    """
    if callback is None:
        return
    result = callback(error)
    if inspect.isawaitable(result):
        await result
