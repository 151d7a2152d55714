"""Data models for requests, responses and email-connection credentials."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

SIGNATURE_PARAM = "signature"


class HttpMethod(str, Enum):
    """HTTP verbs used by the Sift API."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class Credentials(BaseModel):
    """Developer credentials, owned by a single client instance."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1, description="Developer API key")
    secret_key: SecretStr = Field(description="Developer secret key")

    @field_validator("secret_key")
    @classmethod
    def _secret_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("secret_key must not be empty")
        return value


class RequestSpec(BaseModel):
    """Method, path and stringified parameters of a single API call."""

    method: HttpMethod
    path: str
    params: dict[str, str] = Field(default_factory=dict)


class SignedRequest(RequestSpec):
    """A :class:`RequestSpec` carrying ``api_key``, ``timestamp`` and ``signature``."""

    @property
    def signature(self) -> str:
        return self.params[SIGNATURE_PARAM]

    @property
    def sends_body(self) -> bool:
        """POST sends a form body; GET and DELETE use the query string."""
        return self.method is HttpMethod.POST

    @property
    def query_params(self) -> dict[str, str] | None:
        return None if self.sends_body else self.params

    @property
    def form_data(self) -> dict[str, str] | None:
        return self.params if self.sends_body else None


class Envelope(BaseModel):
    """The ``{code, id, message, result}`` wrapper around every response."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    code: int
    id: str | None = None
    message: str | None = None
    result: Any = None

    @property
    def is_error(self) -> bool:
        return self.code >= 400


# ----------------------------------------------------------------------
# Email-connection credentials
# ----------------------------------------------------------------------


class _ConnectionCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_params(self) -> dict[str, str]:
        """Form params for this account type, omitting unset optionals."""
        return {
            key: str(value)
            for key, value in self.model_dump(exclude_none=True).items()
        }


class GmailCredentials(_ConnectionCredentials):
    account_type: Literal["google"] = "google"
    refresh_token: str
    redirect_uri: str | None = None


class YahooCredentials(_ConnectionCredentials):
    account_type: Literal["yahoo"] = "yahoo"
    refresh_token: str
    redirect_uri: str | None = None


class LiveCredentials(_ConnectionCredentials):
    account_type: Literal["live"] = "live"
    refresh_token: str
    redirect_uri: str | None = None


class ImapCredentials(_ConnectionCredentials):
    account_type: Literal["imap"] = "imap"
    password: str
    host: str


class ExchangeCredentials(_ConnectionCredentials):
    """Exchange account; Sift autodiscovers the host when ``host`` is omitted."""

    account_type: Literal["exchange"] = "exchange"
    email: str
    password: str
    host: str | None = None


EmailConnectionCredentials = Annotated[
    GmailCredentials
    | YahooCredentials
    | LiveCredentials
    | ImapCredentials
    | ExchangeCredentials,
    Field(discriminator="account_type"),
]
