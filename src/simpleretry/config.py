r"""Configuration dataclass for retry execution.

This module provides the ``RetryConfig`` dataclass consumed by the
synchronous and asynchronous retry executors.
"""

from __future__ import annotations

__all__ = ["RetryConfig"]

from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from simpleretry.validation import validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Callable

    from simpleretry.exceptions import RetryExhaustedError


@dataclass
class RetryConfig:
    """Configuration for retry behavior.

    The configuration is validated on construction, so an invalid
    configuration can never reach an executor.

    Args:
        retry_interval: Interval waited between two attempts, in seconds
            or as a ``timedelta``. Must be >= 0. The same interval is used
            between every pair of attempts.
        max_retries: Maximum number of retries after the initial attempt.
            Must be >= 0. The work is attempted at most
            ``max_retries + 1`` times.
        exception_types: Exception types to retry. An exception matches
            when it is an instance of one of the types (subclasses
            included). Empty means every ``Exception`` is retried.
        on_every_failure: Optional callback invoked with the exception of
            every failed attempt, before the exception type is checked.
        on_final_failure: Optional callback invoked with the
            ``RetryExhaustedError`` right before it is raised.

    Raises:
        RetryConfigurationError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from simpleretry.config import RetryConfig
        >>> config = RetryConfig(retry_interval=0.5, max_retries=2)
        >>> config.max_retries
        2
        >>> config = RetryConfig(0.5, 2, exception_types=[ConnectionError])
        >>> config.exception_types
        (<class 'ConnectionError'>,)

        ```
    """

    retry_interval: float | timedelta
    max_retries: int
    exception_types: tuple[type[Exception], ...] = field(default_factory=tuple)
    on_every_failure: Callable[[Exception], Any] | None = None
    on_final_failure: Callable[[RetryExhaustedError], Any] | None = None

    def __post_init__(self) -> None:
        self.exception_types = tuple(self.exception_types)
        validate_retry_params(
            retry_interval=self.retry_interval,
            max_retries=self.max_retries,
            exception_types=self.exception_types,
            on_every_failure=self.on_every_failure,
            on_final_failure=self.on_final_failure,
        )

    @property
    def interval_seconds(self) -> float:
        """The retry interval in seconds.

        Example:
            ```pycon
            >>> from datetime import timedelta
            >>> from simpleretry.config import RetryConfig
            >>> RetryConfig(timedelta(milliseconds=250), 1).interval_seconds
            0.25

            ```
        """
        if isinstance(self.retry_interval, timedelta):
            return self.retry_interval.total_seconds()
        return float(self.retry_interval)

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied. The new config is
        validated like any other.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ``RetryConfig`` instance with overrides applied.

        Example:
            ```pycon
            >>> from simpleretry.config import RetryConfig
            >>> config = RetryConfig(retry_interval=0.1, max_retries=3)
            >>> config.merge(max_retries=5).max_retries
            5
            >>> config.max_retries
            3

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
