r"""Retry decision logic for determining whether to retry a failure.

This module provides the RetryDecider class that encapsulates the logic
for deciding whether an exception raised by the unit of work is one of
the exception types the caller asked to handle.
"""

from __future__ import annotations

__all__ = ["RetryDecider", "is_of_type_or_inherits"]


def is_of_type_or_inherits(error: BaseException, error_type: type[BaseException]) -> bool:
    """Indicate if an error is of a given type or of one of its subclasses.

    Args:
        error: The error to check.
        error_type: The target exception type.

    Returns:
        ``True`` if the type of ``error`` is ``error_type`` or a
            transitive subclass of it, otherwise ``False``.

    Example:
        ```pycon
        >>> from simpleretry.retry.decider import is_of_type_or_inherits
        >>> is_of_type_or_inherits(ConnectionResetError(), OSError)
        True
        >>> is_of_type_or_inherits(OSError(), ConnectionResetError)
        False

        ```
    """
    return isinstance(error, error_type)


class RetryDecider:
    """Decides whether a failed attempt should be retried.

    Args:
        exception_types: The exception types to handle. Empty means
            every exception is handled.

    Example:
        ```pycon
        >>> from simpleretry.retry.decider import RetryDecider
        >>> decider = RetryDecider((OSError,))
        >>> decider.is_handled(TimeoutError())
        True
        >>> decider.is_handled(ZeroDivisionError())
        False
        >>> RetryDecider(()).is_handled(ZeroDivisionError())
        True

        ```
    """

    def __init__(self, exception_types: tuple[type[Exception], ...]) -> None:
        self.exception_types = exception_types

    def is_handled(self, error: Exception) -> bool:
        """Indicate if the error matches one of the handled types.

        Args:
            error: The exception raised by the failed attempt.

        Returns:
            ``True`` if the error should be collected and retried,
                ``False`` if it must be re-raised immediately.
        """
        if not self.exception_types:
            return True
        return any(is_of_type_or_inherits(error, t) for t in self.exception_types)
