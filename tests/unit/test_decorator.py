r"""Unit tests for the retry decorator."""

from __future__ import annotations

import inspect
from unittest.mock import Mock, call

import pytest

from simpleretry import RetryConfigurationError, RetryExhaustedError, retry
from tests.helpers import NotSupportedError, SystemFailure


def test_retry_decorator_returns_result(mock_sleep: Mock) -> None:
    @retry(0.1, 2)
    def add(a: int, b: int) -> int:
        return a + b

    assert add(1, b=2) == 3
    mock_sleep.assert_not_called()


def test_retry_decorator_preserves_metadata() -> None:
    @retry(0.1, 2)
    def documented() -> None:
        """Documented function."""

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Documented function."


def test_retry_decorator_retries(mock_sleep: Mock) -> None:
    calls = []

    @retry(0.1, 3, ConnectionError)
    def flaky(value: str) -> str:
        calls.append(value)
        if len(calls) < 3:
            msg = "not yet"
            raise ConnectionError(msg)
        return value.upper()

    assert flaky("ok") == "OK"
    assert calls == ["ok", "ok", "ok"]
    assert mock_sleep.call_args_list == [call(0.1), call(0.1)]


def test_retry_decorator_exhausts(mock_sleep: Mock) -> None:
    on_final_failure = Mock()

    @retry(0.01, 1, SystemFailure, on_final_failure=on_final_failure)
    def always_fails() -> None:
        msg = "not supported"
        raise NotSupportedError(msg)

    with pytest.raises(RetryExhaustedError) as exc_info:
        always_fails()

    assert exc_info.value.attempts == 2
    on_final_failure.assert_called_once_with(exc_info.value)


def test_retry_decorator_independent_calls(mock_sleep: Mock) -> None:
    @retry(0.01, 1)
    def always_fails(value: int) -> None:
        raise ValueError(value)

    with pytest.raises(RetryExhaustedError) as first:
        always_fails(1)
    with pytest.raises(RetryExhaustedError) as second:
        always_fails(2)

    assert [exc.args for exc in first.value.exceptions] == [(1,), (1,)]
    assert [exc.args for exc in second.value.exceptions] == [(2,), (2,)]


def test_retry_decorator_unhandled_type(mock_sleep: Mock) -> None:
    on_every_failure = Mock()

    @retry(0.01, 5, ZeroDivisionError, on_every_failure=on_every_failure)
    def fails() -> None:
        msg = "boom"
        raise KeyError(msg)

    with pytest.raises(KeyError):
        fails()

    on_every_failure.assert_called_once()
    mock_sleep.assert_not_called()


def test_retry_decorator_validates_on_creation() -> None:
    with pytest.raises(RetryConfigurationError, match=r"max_retries must be >= 0, got -1"):
        retry(0.1, -1)


@pytest.mark.asyncio
async def test_retry_decorator_async_function(mock_asleep: Mock) -> None:
    calls = []

    @retry(0.2, 3, ConnectionError)
    async def fetch(key: str) -> str:
        calls.append(key)
        if len(calls) < 2:
            msg = "not yet"
            raise ConnectionError(msg)
        return f"value-{key}"

    assert inspect.iscoroutinefunction(fetch)
    assert await fetch("a") == "value-a"
    assert calls == ["a", "a"]
    mock_asleep.assert_called_once_with(0.2)


@pytest.mark.asyncio
async def test_retry_decorator_async_function_exhausts(mock_asleep: Mock) -> None:
    @retry(0.2, 2)
    async def always_fails() -> None:
        msg = "boom"
        raise ValueError(msg)

    with pytest.raises(RetryExhaustedError) as exc_info:
        await always_fails()

    assert exc_info.value.attempts == 3
    assert mock_asleep.call_count == 2
