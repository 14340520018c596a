r"""Shared control flow for retry executors.

The retry loop is written once, as a generator that yields the steps
to perform: attempt the work, notify a callback, wait, or raise. The
synchronous and asynchronous executors drive the same generator and
only differ in how they call the work, call callbacks and wait.

When the driver performs an ``Attempt`` step, it must send the
exception raised by the work back into the generator. On success the
driver returns the result directly and closes the generator.
"""

from __future__ import annotations

__all__ = ["Attempt", "Notify", "Raise", "RetryStep", "Sleep", "iter_retry_steps"]

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from simpleretry.exceptions import RetryExhaustedError
from simpleretry.retry.decider import RetryDecider
from simpleretry.validation import validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

    from simpleretry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attempt:
    """Invoke the unit of work.

    Attributes:
        attempt: Current attempt number (0-indexed).
    """

    attempt: int


@dataclass(frozen=True)
class Notify:
    """Invoke an observer callback with an error."""

    callback: Callable[[Any], Any]
    error: Exception


@dataclass(frozen=True)
class Sleep:
    """Wait before the next attempt."""

    seconds: float


@dataclass(frozen=True)
class Raise:
    """Raise an error to the caller and stop."""

    error: Exception


RetryStep = Attempt | Notify | Sleep | Raise


def iter_retry_steps(config: RetryConfig) -> Generator[RetryStep, Exception | None, None]:
    """Generate the steps of one retry execution.

    The order of the steps for a failed attempt is: notify
    ``on_every_failure``, check the exception type, collect the error,
    then wait if another attempt follows. An unhandled exception type
    yields a ``Raise`` step with the original exception. Once every
    attempt failed, ``on_final_failure`` is notified and a ``Raise`` step
    with the ``RetryExhaustedError`` is yielded.

    Args:
        config: The retry configuration.

    Raises:
        RetryConfigurationError: If the configuration was made invalid
            after construction. Raised before the first attempt.

    Yields:
        The next step to perform. The driver must send the exception
            raised by the work after each ``Attempt`` step.

    Example:
        ```pycon
        >>> from simpleretry.config import RetryConfig
        >>> from simpleretry.retry.executor_core import iter_retry_steps
        >>> steps = iter_retry_steps(RetryConfig(retry_interval=0.5, max_retries=1))
        >>> next(steps)
        Attempt(attempt=0)
        >>> steps.send(ValueError("boom"))
        Sleep(seconds=0.5)
        >>> next(steps)
        Attempt(attempt=1)

        ```
    """
    exception_types = tuple(config.exception_types)
    validate_retry_params(
        retry_interval=config.retry_interval,
        max_retries=config.max_retries,
        exception_types=exception_types,
        on_every_failure=config.on_every_failure,
        on_final_failure=config.on_final_failure,
    )
    decider = RetryDecider(exception_types)
    max_attempts = config.max_retries + 1
    errors: list[Exception] = []

    for attempt in range(max_attempts):
        error = yield Attempt(attempt)
        logger.debug(
            f"Attempt {attempt + 1}/{max_attempts} failed with "
            f"{type(error).__name__}: {error}"
        )
        if config.on_every_failure is not None:
            yield Notify(config.on_every_failure, error)

        if not decider.is_handled(error):
            logger.debug(f"{type(error).__name__} is not a handled exception type, re-raising")
            yield Raise(error)
            return

        errors.append(error)
        if attempt < config.max_retries:
            logger.debug(f"Waiting {config.interval_seconds:.2f}s before retry")
            yield Sleep(config.interval_seconds)

    exhausted = RetryExhaustedError(f"Work failed after {max_attempts} attempt(s)", errors)
    logger.debug(f"All {max_attempts} attempt(s) failed")
    if config.on_final_failure is not None:
        yield Notify(config.on_final_failure, exhausted)
    yield Raise(exhausted)
