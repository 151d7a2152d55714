"""Unwraps the ``{code, id, message, result}`` response envelope."""

from __future__ import annotations

import json
from typing import Any

import httpx
from pydantic import ValidationError

from .errors import ApiError, MalformedResponseError, TransportError
from .models import Envelope


def parse_envelope(
    status_code: int,
    body: str | bytes,
    *,
    response: httpx.Response | None = None,
) -> Any:
    """Return the envelope's ``result`` or raise a typed error.

    HTTP 4xx/5xx raises :class:`TransportError` before the body is read.
    An envelope ``code >= 400`` raises :class:`ApiError`.
    """
    if status_code >= 400:
        text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
        raise TransportError(
            f"Sift API call failed with HTTP {status_code}",
            status_code=status_code,
            body=text,
            response=response,
        )

    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise MalformedResponseError("Response body is not valid JSON", body=body) from exc

    if not isinstance(payload, dict):
        raise MalformedResponseError("Response body is not a JSON object", body=body)

    try:
        envelope = Envelope.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponseError(f"Invalid response envelope: {exc}", body=body) from exc

    if envelope.is_error:
        raise ApiError(envelope.id, envelope.code, envelope.message)
    return envelope.result


def parse_response(response: httpx.Response) -> Any:
    return parse_envelope(response.status_code, response.content, response=response)
