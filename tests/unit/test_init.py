r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import simpleretry


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(simpleretry.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in simpleretry.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in simpleretry.__all__:
        assert hasattr(simpleretry, name), f"{name} is in __all__ but not defined in module"


def test_execute_is_function() -> None:
    """Test that the execute entry points are exported as functions."""
    assert callable(simpleretry.execute)
    assert callable(simpleretry.execute_async)
    assert callable(simpleretry.retry)
