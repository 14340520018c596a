r"""Exceptions raised by the retry executors.

This module defines the errors surfaced to callers: configuration
errors detected before any attempt is made, and the aggregated error
raised once every attempt has failed.
"""

from __future__ import annotations

__all__ = ["RetryConfigurationError", "RetryExhaustedError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class RetryConfigurationError(ValueError):
    """Raised when retry parameters are invalid.

    This error is raised synchronously, before the unit of work is
    invoked even once, and is never retried.

    Example:
        ```pycon
        >>> from simpleretry import execute
        >>> from simpleretry.exceptions import RetryConfigurationError
        >>> try:
        ...     execute(lambda: 1, retry_interval=0.1, max_retries=-1)
        ... except RetryConfigurationError as exc:
        ...     print(exc)
        ...
        max_retries must be >= 0, got -1

        ```
    """


class RetryExhaustedError(ExceptionGroup):  # noqa: N818
    """Raised when every attempt failed with a handled exception type.

    This is an ``ExceptionGroup``: ``exceptions`` holds every failure
    collected during the execution, in the order the attempts were made.

    Args:
        message: The error message.
        exceptions: The collected failures. Must not be empty.

    Example:
        ```pycon
        >>> from simpleretry.exceptions import RetryExhaustedError
        >>> error = RetryExhaustedError(
        ...     "failed after 2 attempts", [ValueError("a"), ValueError("b")]
        ... )
        >>> error.attempts
        2
        >>> [str(exc) for exc in error.exceptions]
        ['a', 'b']

        ```
    """

    def __new__(cls, message: str, exceptions: Sequence[Exception]) -> RetryExhaustedError:
        return super().__new__(cls, message, exceptions)

    @property
    def attempts(self) -> int:
        """The number of failed attempts wrapped by this error."""
        return len(self.exceptions)

    def derive(self, excs: Sequence[Exception]) -> RetryExhaustedError:
        return RetryExhaustedError(self.message, excs)
