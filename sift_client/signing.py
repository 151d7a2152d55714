"""HMAC-SHA1 request signing.

The canonical string is ``METHOD&path`` followed by ``&key=value`` for
every parameter in ascending key order.  Values are used raw (not
URL-escaped); the ``signature`` parameter itself is never signed.
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping

from .errors import ConfigurationError
from .models import SIGNATURE_PARAM, HttpMethod


class Signer:
    """Computes request signatures with a developer secret key."""

    def __init__(self, secret_key: str) -> None:
        if not secret_key:
            raise ConfigurationError("secret_key is required for request signing")
        self._key = secret_key.encode("utf-8")

    @staticmethod
    def canonical_string(
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, str],
    ) -> str:
        verb = method.value if isinstance(method, HttpMethod) else method
        parts = [f"{verb}&{path}"]
        for key in sorted(params):
            if key == SIGNATURE_PARAM:
                continue
            parts.append(f"{key}={params[key]}")
        return "&".join(parts)

    def sign(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, str],
    ) -> str:
        base = self.canonical_string(method, path, params)
        return hmac.new(self._key, base.encode("utf-8"), hashlib.sha1).hexdigest()
