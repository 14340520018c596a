r"""Ready-made groups of exception types to retry.

The groups can be unpacked into the ``*exception_types`` argument of
``execute``, ``execute_async`` or ``retry``.

Example:
    ```pycon
    >>> import httpx
    >>> from simpleretry import execute
    >>> from simpleretry.presets import HTTPX_TRANSIENT_ERRORS
    >>> with httpx.Client() as client:  # doctest: +SKIP
    ...     response = execute(
    ...         lambda: client.get("https://api.example.com/data"),
    ...         0.5,
    ...         3,
    ...         *HTTPX_TRANSIENT_ERRORS,
    ...     )
    ...

    ```
"""

from __future__ import annotations

__all__ = ["HTTPX_TRANSIENT_ERRORS"]

import httpx

# Transport failures that are usually worth retrying:
# TimeoutException: connect, read, write and pool timeouts
# NetworkError: connection refused or reset, read/write errors
# RemoteProtocolError: the server closed or broke the connection
HTTPX_TRANSIENT_ERRORS: tuple[type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)
