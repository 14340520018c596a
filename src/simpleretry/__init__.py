r"""simpleretry - Retry a unit of work with a fixed interval.

This package re-invokes a unit of work that may fail, up to a bounded
number of times, waiting a fixed interval between attempts. It can
restrict which exception types are retried and notify observers on
every failure and on final exhaustion.

Key Features:
    - Bounded retries: at most ``max_retries + 1`` attempts
    - Constant interval between attempts, in seconds or as a timedelta
    - Exception type filtering with subclass matching
    - ``on_every_failure`` and ``on_final_failure`` callbacks
    - All failures aggregated in a ``RetryExhaustedError`` (an ExceptionGroup)
    - Synchronous and asyncio variants sharing a single retry flow
    - ``retry`` decorator for functions and coroutine functions

Example:
    ```pycon
    >>> from simpleretry import execute, retry
    >>> execute(lambda: "ok", retry_interval=0.1, max_retries=2)
    'ok'
    >>> @retry(0.1, 3, ConnectionError)
    ... def ping():
    ...     return "pong"
    ...
    >>> ping()
    'pong'

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "RetryConfig",
    "RetryConfigurationError",
    "RetryExecutor",
    "RetryExhaustedError",
    "__version__",
    "execute",
    "execute_async",
    "retry",
]

from importlib.metadata import PackageNotFoundError, version

from simpleretry.config import RetryConfig
from simpleretry.decorator import retry
from simpleretry.exceptions import RetryConfigurationError, RetryExhaustedError
from simpleretry.execute import execute
from simpleretry.execute_async import execute_async
from simpleretry.retry import AsyncRetryExecutor, RetryExecutor

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
