"""Maps each Sift API operation onto a method, path and parameter set."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from datetime import datetime

from .models import (
    Credentials,
    EmailConnectionCredentials,
    HttpMethod,
    RequestSpec,
    SignedRequest,
)
from .signing import Signer


def _epoch_seconds(value: datetime | float | int) -> int:
    if isinstance(value, datetime):
        return int(value.timestamp())
    return int(value)


def _paging_params(offset: int | None, limit: int | None) -> dict[str, str]:
    params: dict[str, str] = {}
    if offset is not None:
        params["offset"] = str(offset)
    if limit is not None:
        params["limit"] = str(limit)
    return params


class RequestBuilder:
    """Builds unsigned :class:`RequestSpec` objects and signs them.

    ``clock`` returns the current Unix time; it is read once per
    :meth:`finalize` call so every request gets a fresh timestamp.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._credentials = credentials
        self._signer = Signer(credentials.secret_key.get_secret_value())
        self._clock = clock

    @property
    def signer(self) -> Signer:
        return self._signer

    def finalize(self, spec: RequestSpec) -> SignedRequest:
        """Inject ``api_key`` and ``timestamp``, then sign over everything."""
        params = dict(spec.params)
        params["api_key"] = self._credentials.api_key
        params["timestamp"] = str(int(self._clock()))
        params["signature"] = self._signer.sign(spec.method, spec.path, params)
        return SignedRequest(method=spec.method, path=spec.path, params=params)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def connect_token(self, username: str) -> RequestSpec:
        return RequestSpec(
            method=HttpMethod.POST,
            path="/v1/connect_token",
            params={"username": username},
        )

    def add_user(self, username: str, locale: str) -> RequestSpec:
        return RequestSpec(
            method=HttpMethod.POST,
            path="/v1/users",
            params={"username": username, "locale": locale},
        )

    def delete_user(self, username: str) -> RequestSpec:
        return RequestSpec(method=HttpMethod.DELETE, path=f"/v1/users/{username}")

    # ------------------------------------------------------------------
    # Sifts
    # ------------------------------------------------------------------

    def list_sifts(
        self,
        username: str,
        *,
        last_update_time: datetime | float | int | None = None,
        offset: int | None = None,
        limit: int | None = None,
        domains: Iterable[str] | None = None,
    ) -> RequestSpec:
        params: dict[str, str] = {}
        if last_update_time is not None:
            params["last_update_time"] = str(_epoch_seconds(last_update_time))
        params.update(_paging_params(offset, limit))
        if isinstance(domains, str):
            domains = [domains]
        joined = ",".join(domains or ())
        if joined:
            params["domains"] = joined
        return RequestSpec(
            method=HttpMethod.GET,
            path=f"/v1/users/{username}/sifts",
            params=params,
        )

    def get_sift(self, username: str, sift_id: int) -> RequestSpec:
        return RequestSpec(
            method=HttpMethod.GET,
            path=f"/v1/users/{username}/sifts/{int(sift_id)}",
        )

    # ------------------------------------------------------------------
    # Email connections
    # ------------------------------------------------------------------

    def list_connections(
        self,
        username: str,
        *,
        offset: int | None = None,
        limit: int | None = None,
    ) -> RequestSpec:
        return RequestSpec(
            method=HttpMethod.GET,
            path=f"/v1/users/{username}/email_connections",
            params=_paging_params(offset, limit),
        )

    def add_email_connection(
        self,
        username: str,
        account: str,
        credentials: EmailConnectionCredentials,
    ) -> RequestSpec:
        params = credentials.to_params()
        params["account_type"] = credentials.account_type
        params["account"] = account
        return RequestSpec(
            method=HttpMethod.POST,
            path=f"/v1/users/{username}/email_connections",
            params=params,
        )

    def delete_connection(self, username: str, conn_id: int) -> RequestSpec:
        return RequestSpec(
            method=HttpMethod.DELETE,
            path=f"/v1/users/{username}/email_connections/{int(conn_id)}",
        )

    # ------------------------------------------------------------------
    # Discovery / feedback
    # ------------------------------------------------------------------

    def discovery(self, eml: str) -> RequestSpec:
        return RequestSpec(
            method=HttpMethod.POST,
            path="/v1/discovery",
            params={"email": eml.strip()},
        )

    def feedback(self, eml: str, locale: str, timezone: str) -> RequestSpec:
        return RequestSpec(
            method=HttpMethod.POST,
            path="/v1/feedback",
            params={"email": eml.strip(), "locale": locale, "timezone": timezone},
        )
