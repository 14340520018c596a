r"""Parameter validation utilities for retry execution.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before the unit of work is invoked.
Every function raises ``RetryConfigurationError`` on invalid input.
"""

from __future__ import annotations

__all__ = [
    "validate_callback",
    "validate_exception_types",
    "validate_max_retries",
    "validate_retry_interval",
    "validate_retry_params",
]

import math
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from simpleretry.exceptions import RetryConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable


def validate_max_retries(max_retries: int) -> None:
    """Validate the maximum number of retries.

    Args:
        max_retries: Maximum number of retries after the initial attempt.
            Must be an integer >= 0. A value of 0 means only the initial
            attempt is made.

    Raises:
        RetryConfigurationError: If ``max_retries`` is not an integer or
            is negative.

    Example:
        ```pycon
        >>> from simpleretry.validation import validate_max_retries
        >>> validate_max_retries(3)
        >>> validate_max_retries(-1)
        Traceback (most recent call last):
        ...
        simpleretry.exceptions.RetryConfigurationError: max_retries must be >= 0, got -1

        ```
    """
    if isinstance(max_retries, bool) or not isinstance(max_retries, int):
        msg = f"max_retries must be an int, got {type(max_retries).__name__}"
        raise RetryConfigurationError(msg)
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise RetryConfigurationError(msg)


def validate_retry_interval(retry_interval: float | timedelta) -> None:
    """Validate the interval waited between two attempts.

    Args:
        retry_interval: The interval in seconds, or as a ``timedelta``.
            Must be >= 0.

    Raises:
        RetryConfigurationError: If the interval is not a number or a
            ``timedelta``, is not finite, or is negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from simpleretry.validation import validate_retry_interval
        >>> validate_retry_interval(0.5)
        >>> validate_retry_interval(timedelta(milliseconds=100))

        ```
    """
    if isinstance(retry_interval, timedelta):
        seconds = retry_interval.total_seconds()
    elif isinstance(retry_interval, (int, float)) and not isinstance(retry_interval, bool):
        seconds = retry_interval
    else:
        msg = (
            "retry_interval must be a number of seconds or a timedelta, "
            f"got {type(retry_interval).__name__}"
        )
        raise RetryConfigurationError(msg)
    if not math.isfinite(seconds):
        msg = f"retry_interval must be finite, got {retry_interval}"
        raise RetryConfigurationError(msg)
    if seconds < 0:
        msg = f"retry_interval must be >= 0, got {retry_interval}"
        raise RetryConfigurationError(msg)


def _describe(entry: Any) -> str:
    return getattr(entry, "__name__", repr(entry))


def validate_exception_types(exception_types: Iterable[Any]) -> None:
    """Validate the exception types to handle.

    Every entry must be a class deriving from ``Exception``. All the
    invalid entries are reported at once, not only the first one.

    Args:
        exception_types: The exception types to handle. May be empty.

    Raises:
        RetryConfigurationError: If at least one entry is not an
            exception class.

    Example:
        ```pycon
        >>> from simpleretry.validation import validate_exception_types
        >>> validate_exception_types([ValueError, OSError])
        >>> validate_exception_types([ValueError, int, str])
        Traceback (most recent call last):
        ...
        simpleretry.exceptions.RetryConfigurationError: All exception types must be subclasses of Exception. Found 2 invalid type(s): int, str

        ```
    """
    invalid = [
        entry
        for entry in exception_types
        if not (isinstance(entry, type) and issubclass(entry, Exception))
    ]
    if invalid:
        names = ", ".join(_describe(entry) for entry in invalid)
        msg = (
            "All exception types must be subclasses of Exception. "
            f"Found {len(invalid)} invalid type(s): {names}"
        )
        raise RetryConfigurationError(msg)


def validate_callback(name: str, callback: Any) -> None:
    """Validate an optional callback.

    Args:
        name: The parameter name, used in the error message.
        callback: The callback to validate. ``None`` is accepted.

    Raises:
        RetryConfigurationError: If ``callback`` is neither ``None`` nor
            callable.
    """
    if callback is not None and not callable(callback):
        msg = f"{name} must be callable or None, got {type(callback).__name__}"
        raise RetryConfigurationError(msg)


def validate_retry_params(
    retry_interval: float | timedelta,
    max_retries: int,
    exception_types: Iterable[Any] = (),
    on_every_failure: Any = None,
    on_final_failure: Any = None,
) -> None:
    """Validate all retry parameters.

    ``max_retries`` is checked first, then the interval, the exception
    types and finally the callbacks.

    Args:
        retry_interval: The interval waited between two attempts.
        max_retries: Maximum number of retries after the initial attempt.
        exception_types: The exception types to handle.
        on_every_failure: Optional callback invoked on every failure.
        on_final_failure: Optional callback invoked on exhaustion.

    Raises:
        RetryConfigurationError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from simpleretry.validation import validate_retry_params
        >>> validate_retry_params(retry_interval=0.1, max_retries=3)
        >>> validate_retry_params(0.1, 3, exception_types=(ConnectionError,))

        ```
    """
    validate_max_retries(max_retries)
    validate_retry_interval(retry_interval)
    validate_exception_types(exception_types)
    validate_callback("on_every_failure", on_every_failure)
    validate_callback("on_final_failure", on_final_failure)
