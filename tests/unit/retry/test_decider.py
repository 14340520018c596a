r"""Unit tests for retry decider."""

from __future__ import annotations

import httpx
import pytest

from simpleretry.retry.decider import RetryDecider, is_of_type_or_inherits
from tests.helpers import NotSupportedError, SystemFailure

############################################
#     Tests for is_of_type_or_inherits     #
############################################


@pytest.mark.parametrize(
    ("error", "error_type"),
    [
        (ValueError(), ValueError),
        (NotSupportedError(), NotSupportedError),
        (NotSupportedError(), SystemFailure),
        (NotSupportedError(), Exception),
        (ConnectionResetError(), OSError),
        (httpx.ConnectError("refused"), httpx.TransportError),
    ],
)
def test_is_of_type_or_inherits_true(error: Exception, error_type: type[Exception]) -> None:
    assert is_of_type_or_inherits(error, error_type)


@pytest.mark.parametrize(
    ("error", "error_type"),
    [
        (SystemFailure(), NotSupportedError),
        (NotSupportedError(), ZeroDivisionError),
        (ValueError(), KeyError),
        (httpx.ConnectError("refused"), httpx.TimeoutException),
    ],
)
def test_is_of_type_or_inherits_false(error: Exception, error_type: type[Exception]) -> None:
    assert not is_of_type_or_inherits(error, error_type)


##################################
#     Tests for RetryDecider     #
##################################


def test_retry_decider_creation() -> None:
    decider = RetryDecider(exception_types=(ValueError, KeyError))
    assert decider.exception_types == (ValueError, KeyError)


@pytest.mark.parametrize("error", [ValueError(), NotSupportedError(), ZeroDivisionError()])
def test_retry_decider_handles_everything_without_types(error: Exception) -> None:
    assert RetryDecider(exception_types=()).is_handled(error)


def test_retry_decider_handles_listed_type() -> None:
    assert RetryDecider(exception_types=(ZeroDivisionError,)).is_handled(ZeroDivisionError())


def test_retry_decider_handles_subclass_of_listed_type() -> None:
    assert RetryDecider(exception_types=(SystemFailure,)).is_handled(NotSupportedError())


def test_retry_decider_rejects_unlisted_type() -> None:
    assert not RetryDecider(exception_types=(ZeroDivisionError,)).is_handled(NotSupportedError())


def test_retry_decider_rejects_parent_of_listed_type() -> None:
    assert not RetryDecider(exception_types=(NotSupportedError,)).is_handled(SystemFailure())


def test_retry_decider_handles_any_of_several_types() -> None:
    decider = RetryDecider(exception_types=(KeyError, SystemFailure))
    assert decider.is_handled(KeyError())
    assert decider.is_handled(NotSupportedError())
    assert not decider.is_handled(ValueError())
