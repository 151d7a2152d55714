"""Error hierarchy raised by the Sift client.

Every failure surfaces to the caller as a :class:`SiftError` subclass.
Nothing is retried or swallowed inside the library.
"""

from __future__ import annotations

from typing import Any

import httpx


class SiftError(Exception):
    """Base class for all Sift client errors."""


class ConfigurationError(SiftError):
    """Credentials are missing or invalid."""


class PoolExhaustedError(SiftError):
    """No pooled connection became available within the pool timeout."""


class TransportError(SiftError):
    """The HTTP exchange itself failed.

    Raised for 4xx/5xx status codes (``status_code`` and ``body`` set) and
    for network-level failures (``status_code`` is ``None``).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.response = response


class ApiError(SiftError):
    """The response envelope reported ``code >= 400``."""

    def __init__(self, request_id: str | None, code: int, message: str | None) -> None:
        super().__init__(
            f"Sift API error (request_id={request_id}, code={code}): {message}"
        )
        self.request_id = request_id
        self.code = code
        self.message = message


class MalformedResponseError(SiftError):
    """The response body is not a valid envelope."""

    def __init__(self, message: str, *, body: Any = None) -> None:
        super().__init__(message)
        self.body = body
