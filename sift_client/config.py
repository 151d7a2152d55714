"""Client configuration loaded from environment variables.

Uses pydantic-settings so every field can be overridden via ``SIFT_*``
env vars.  Credentials may also be passed directly to
:class:`~sift_client.client.SiftClient`.
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings


class SiftSettings(BaseSettings):
    """Sift API endpoint, credential and connection pool settings."""

    model_config = {"env_prefix": "SIFT_"}

    api_key: str | None = Field(default=None, description="Developer API key")
    secret_key: SecretStr | None = Field(
        default=None,
        description="Developer secret key used for request signing",
    )
    base_url: str = Field(
        default="https://api.easilydo.com",
        description="Base URL of the Sift REST API",
    )
    connect_email_base_url: str = Field(
        default="https://api.edison.tech",
        description="Base URL of the hosted connect-email page",
    )
    pool_size: int = Field(default=20, ge=1, description="Maximum pooled connections")
    pool_timeout_seconds: float = Field(
        default=30.0,
        description="Seconds to wait for a free pooled connection",
    )
    timeout_seconds: float = Field(
        default=30.0,
        description="Connect/read/write timeout per request",
    )
