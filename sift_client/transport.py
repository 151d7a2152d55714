"""Bounded HTTP connection pool over TLS, backed by :class:`httpx.Client`.

httpx checks a connection out of its pool for each request and returns it
once the response body has been read or the request failed, so a failing
call never leaks a connection.
"""

from __future__ import annotations

import httpx
import structlog

from .config import SiftSettings
from .errors import PoolExhaustedError, TransportError
from .models import SignedRequest

logger = structlog.get_logger()


class ConnectionPool:
    """Client-scoped pool of keep-alive connections to the Sift API.

    Pass ``transport`` to substitute the network layer (e.g. in tests).
    """

    def __init__(
        self,
        settings: SiftSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._client = httpx.Client(
            base_url=settings.base_url,
            limits=httpx.Limits(
                max_connections=settings.pool_size,
                max_keepalive_connections=settings.pool_size,
            ),
            timeout=httpx.Timeout(
                settings.timeout_seconds,
                pool=settings.pool_timeout_seconds,
            ),
            transport=transport,
        )
        logger.debug(
            "connection_pool_opened",
            base_url=settings.base_url,
            pool_size=settings.pool_size,
        )

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    def send(self, request: SignedRequest) -> httpx.Response:
        """Execute *request* on a pooled connection and return the response.

        Raises :class:`PoolExhaustedError` when no connection frees up within
        the pool timeout and :class:`TransportError` on network failures or
        once the pool has been closed.
        HTTP error statuses are returned, not raised.
        """
        if self._client.is_closed:
            raise TransportError("Connection pool is closed")
        logger.debug("sift_request_sent", method=request.method.value, path=request.path)
        try:
            response = self._client.request(
                request.method.value,
                request.path,
                params=request.query_params,
                data=request.form_data,
            )
        except httpx.PoolTimeout as exc:
            raise PoolExhaustedError(
                f"No connection available within {self._settings.pool_timeout_seconds}s"
            ) from exc
        except httpx.TransportError as exc:
            raise TransportError(f"Sift API call failed: {exc}") from exc

        logger.debug(
            "sift_response_received",
            method=request.method.value,
            path=request.path,
            status_code=response.status_code,
        )
        return response

    def close(self) -> None:
        if not self._client.is_closed:
            self._client.close()
            logger.debug("connection_pool_closed")

    def __enter__(self) -> ConnectionPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
