"""Synchronous client for the Sift email-parsing API."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from .builder import RequestBuilder
from .config import SiftSettings
from .envelope import parse_response
from .errors import ConfigurationError
from .models import (
    Credentials,
    EmailConnectionCredentials,
    ExchangeCredentials,
    GmailCredentials,
    ImapCredentials,
    LiveCredentials,
    RequestSpec,
    YahooCredentials,
)
from .transport import ConnectionPool


class SiftClient:
    """One method per Sift REST endpoint.

    Each call signs its parameters, executes on a pooled connection and
    returns the envelope's ``result``.  Errors are raised as
    :class:`~sift_client.errors.SiftError` subclasses and never retried.

    Usage::

        with SiftClient(api_key, secret_key) as sift:
            sifts = sift.list_sifts("alice", domains=["flight", "hotel"])
    """

    def __init__(
        self,
        api_key: str,
        secret_key: str,
        *,
        settings: SiftSettings | None = None,
        transport: httpx.BaseTransport | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        try:
            self._credentials = Credentials(api_key=api_key, secret_key=secret_key)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid Sift credentials: {exc}") from exc
        self._settings = settings or SiftSettings()
        self._builder = RequestBuilder(self._credentials, clock=clock)
        self._pool = ConnectionPool(self._settings, transport=transport)

    @classmethod
    def from_settings(
        cls,
        settings: SiftSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> SiftClient:
        """Build a client whose credentials come from ``SIFT_*`` env vars."""
        settings = settings or SiftSettings()
        if not settings.api_key or settings.secret_key is None:
            raise ConfigurationError("SIFT_API_KEY and SIFT_SECRET_KEY must be set")
        return cls(
            settings.api_key,
            settings.secret_key.get_secret_value(),
            settings=settings,
            transport=transport,
        )

    @property
    def builder(self) -> RequestBuilder:
        return self._builder

    def close(self) -> None:
        self._pool.close()

    def __enter__(self) -> SiftClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _execute(self, spec: RequestSpec) -> Any:
        signed = self._builder.finalize(spec)
        return parse_response(self._pool.send(signed))

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def connect_token(self, username: str) -> Any:
        """Get a connect token for *username*."""
        return self._execute(self._builder.connect_token(username))

    get_token = connect_token

    def add_user(self, username: str, locale: str) -> Any:
        """Register a new user and return its numeric user id."""
        return self._execute(self._builder.add_user(username, locale))

    def delete_user(self, username: str) -> Any:
        return self._execute(self._builder.delete_user(username))

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
    ) -> Any:
        """List a user's sifts in descending order of last update time.

        Only sifts updated since *last_update_time* are returned when it is
        given; *domains* restricts results to those domains (e.g. ``flight``).
        """
        return self._execute(
            self._builder.list_sifts(
                username,
                last_update_time=last_update_time,
                offset=offset,
                limit=limit,
                domains=domains,
            )
        )

    def get_sift(self, username: str, sift_id: int) -> Any:
        return self._execute(self._builder.get_sift(username, sift_id))

    # ------------------------------------------------------------------
    # Email connections
    # ------------------------------------------------------------------

    def list_connections(
        self,
        username: str,
        *,
        offset: int | None = None,
        limit: int | None = None,
    ) -> Any:
        return self._execute(
            self._builder.list_connections(username, offset=offset, limit=limit)
        )

    def add_email_connection(
        self,
        username: str,
        account: str,
        credentials: EmailConnectionCredentials,
    ) -> Any:
        """Link an email account to *username*; returns the connection id."""
        return self._execute(
            self._builder.add_email_connection(username, account, credentials)
        )

    def add_gmail_connection(
        self,
        username: str,
        account: str,
        refresh_token: str,
        redirect_uri: str | None = None,
    ) -> Any:
        return self.add_email_connection(
            username,
            account,
            GmailCredentials(refresh_token=refresh_token, redirect_uri=redirect_uri),
        )

    def add_yahoo_connection(
        self,
        username: str,
        account: str,
        refresh_token: str,
        redirect_uri: str | None = None,
    ) -> Any:
        return self.add_email_connection(
            username,
            account,
            YahooCredentials(refresh_token=refresh_token, redirect_uri=redirect_uri),
        )

    def add_live_connection(
        self,
        username: str,
        account: str,
        refresh_token: str,
        redirect_uri: str | None = None,
    ) -> Any:
        return self.add_email_connection(
            username,
            account,
            LiveCredentials(refresh_token=refresh_token, redirect_uri=redirect_uri),
        )

    def add_imap_connection(
        self,
        username: str,
        account: str,
        password: str,
        host: str,
    ) -> Any:
        return self.add_email_connection(
            username,
            account,
            ImapCredentials(password=password, host=host),
        )

    def add_exchange_connection(
        self,
        username: str,
        email: str,
        password: str,
        account: str,
        host: str | None = None,
    ) -> Any:
        """Link a Microsoft Exchange account.

        Sift autodiscovers the host when *host* is omitted.
        """
        return self.add_email_connection(
            username,
            account,
            ExchangeCredentials(email=email, password=password, host=host),
        )

    def delete_connection(self, username: str, conn_id: int) -> Any:
        return self._execute(self._builder.delete_connection(username, conn_id))

    # ------------------------------------------------------------------
    # Discovery / feedback
    # ------------------------------------------------------------------

    def discovery(self, eml: str) -> Any:
        """Extract sifts from raw EML content without storing them."""
        return self._execute(self._builder.discovery(eml))

    def feedback(self, eml: str, locale: str, timezone: str) -> Any:
        """Report an email that was not parsed correctly.

        Returns ``{"classified": bool, "extracted": bool}``.
        """
        return self._execute(self._builder.feedback(eml, locale, timezone))

    # ------------------------------------------------------------------
    # Client-side helpers
    # ------------------------------------------------------------------

    def connect_email_url(
        self,
        username: str,
        connect_token: str,
        callback_url: str,
    ) -> str:
        """URL of the hosted page where *username* links an email account.

        Built locally and unsigned.  *callback_url* is not embedded; the
        URL carries only the api key, username and token.
        """
        query = urlencode(
            {
                "api_key": self._credentials.api_key,
                "username": username,
                "token": connect_token,
            }
        )
        base = self._settings.connect_email_base_url.rstrip("/")
        return f"{base}/v1/connect_email?{query}"
