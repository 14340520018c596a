r"""Retry package implementing class-based composition pattern.

This package provides the retry executors and the pieces they are
built from.

Public API:
    - RetryDecider: Logic for deciding whether a failure is retried
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
    - iter_retry_steps: The retry flow shared by both executors
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "RetryDecider",
    "RetryExecutor",
    "iter_retry_steps",
]

from simpleretry.retry.decider import RetryDecider
from simpleretry.retry.executor import RetryExecutor
from simpleretry.retry.executor_async import AsyncRetryExecutor
from simpleretry.retry.executor_core import iter_retry_steps
