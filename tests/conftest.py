"""Shared test fixtures for the sift_client test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import respx

from sift_client.builder import RequestBuilder
from sift_client.client import SiftClient
from sift_client.config import SiftSettings
from sift_client.models import Credentials

API_KEY = "test-api-key"
SECRET_KEY = "test-secret-key"
BASE_URL = "https://sift.test"
FIXED_NOW = 1_700_000_000


@pytest.fixture
def settings() -> SiftSettings:
    return SiftSettings(
        base_url=BASE_URL,
        connect_email_base_url="https://connect.sift.test",
        pool_size=2,
        pool_timeout_seconds=1.0,
        timeout_seconds=5.0,
    )


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key=API_KEY, secret_key=SECRET_KEY)


@pytest.fixture
def builder(credentials: Credentials) -> RequestBuilder:
    return RequestBuilder(credentials, clock=lambda: FIXED_NOW)


@pytest.fixture
def client(settings: SiftSettings) -> Iterator[SiftClient]:
    sift = SiftClient(API_KEY, SECRET_KEY, settings=settings, clock=lambda: FIXED_NOW)
    yield sift
    sift.close()


@pytest.fixture
def sift_api() -> Iterator[respx.MockRouter]:
    """respx router scoped to the test Sift base URL."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def make_envelope():
    """Factory for response envelopes with overrides."""

    def _make(result=None, *, code: int = 200, request_id: str = "req-1", message=None) -> dict:
        body = {"code": code, "id": request_id, "result": result}
        if message is not None:
            body["message"] = message
        return body

    return _make
