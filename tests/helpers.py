r"""Shared test helpers for the retry executor tests."""

from __future__ import annotations

__all__ = ["NotSupportedError", "SystemFailure", "make_work", "make_work_async"]

from typing import Any
from unittest.mock import AsyncMock, Mock


class SystemFailure(Exception):
    """Base exception type used to test subclass matching."""


class NotSupportedError(SystemFailure):
    """Exception type deriving from ``SystemFailure``."""


def make_work(failures: int, result: Any = "ok", error_type: type[Exception] = ValueError) -> Mock:
    """Create a work mock failing a number of times before returning.

    Args:
        failures: The number of calls raising an exception.
        result: The value returned once the failures are consumed.
        error_type: The type of the raised exceptions.

    Returns:
        A Mock raising ``error_type(f"failure {i}")`` on the first
            ``failures`` calls, then returning ``result``.
    """
    return Mock(side_effect=[error_type(f"failure {i}") for i in range(failures)] + [result])


def make_work_async(
    failures: int, result: Any = "ok", error_type: type[Exception] = ValueError
) -> AsyncMock:
    """Create an async work mock failing a number of times before
    returning."""
    return AsyncMock(side_effect=[error_type(f"failure {i}") for i in range(failures)] + [result])
