"""Sift API client.

Public API re-exported here for convenience::

    from sift_client import SiftClient, ApiError
"""

from .builder import RequestBuilder
from .client import SiftClient
from .config import SiftSettings
from .envelope import parse_envelope, parse_response
from .errors import (
    ApiError,
    ConfigurationError,
    MalformedResponseError,
    PoolExhaustedError,
    SiftError,
    TransportError,
)
from .logging import setup_logging
from .models import (
    Credentials,
    EmailConnectionCredentials,
    Envelope,
    ExchangeCredentials,
    GmailCredentials,
    HttpMethod,
    ImapCredentials,
    LiveCredentials,
    RequestSpec,
    SignedRequest,
    YahooCredentials,
)
from .signing import Signer
from .transport import ConnectionPool

__all__ = [
    "ApiError",
    "ConfigurationError",
    "ConnectionPool",
    "Credentials",
    "EmailConnectionCredentials",
    "Envelope",
    "ExchangeCredentials",
    "GmailCredentials",
    "HttpMethod",
    "ImapCredentials",
    "LiveCredentials",
    "MalformedResponseError",
    "PoolExhaustedError",
    "RequestBuilder",
    "RequestSpec",
    "SiftClient",
    "SiftError",
    "SiftSettings",
    "SignedRequest",
    "Signer",
    "TransportError",
    "YahooCredentials",
    "parse_envelope",
    "parse_response",
    "setup_logging",
]
