"""
JWT-style token creation and verification.

Tokens are base64url-encoded JSON payloads signed with HMAC-SHA256::

    <base64url({"user": {"id": ...}, "iat": ..., "exp": ...})>.<hex signature>

Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
Verification is pure: it never consults the database, it trusts the
signature and the embedded expiry.
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Any, Optional

from auth.errors import InvalidTokenError, TokenExpiredError
from auth.models import Identity
from config.settings import config

_TOKEN_SECRET = config.jwt_secret
_TOKEN_EXPIRY_SECONDS = config.jwt_expiry_seconds


def _sign(secret: str, raw: bytes) -> str:
    return hmac.new(secret.encode(), raw, hashlib.sha256).hexdigest()


def create_token(
    user_id: Any,
    *,
    secret: str = _TOKEN_SECRET,
    expires_in: int = _TOKEN_EXPIRY_SECONDS,
    now: Optional[float] = None,
) -> str:
    """Create a signed token wrapping ``user_id`` with a fixed expiry."""
    issued_at = int(time.time() if now is None else now)
    payload = {
        "user": {"id": user_id},
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }
    raw = json.dumps(payload, separators=(",", ":")).encode()
    return urlsafe_b64encode(raw).decode() + "." + _sign(secret, raw)


def verify_token(
    token: str,
    *,
    secret: str = _TOKEN_SECRET,
    now: Optional[float] = None,
) -> Identity:
    """
    Verify token and return the embedded :class:`Identity`.

    Raises ``TokenExpiredError`` when the signature is good but ``exp`` has
    passed, and ``InvalidTokenError`` for anything else that fails.
    """
    try:
        encoded, sig = token.split(".", 1)
        raw = urlsafe_b64decode(encoded.encode())
    except (ValueError, binascii.Error) as exc:
        raise InvalidTokenError(reason=f"bad format: {exc}") from exc

    if not sig.isascii() or not hmac.compare_digest(sig, _sign(secret, raw)):
        raise InvalidTokenError(reason="bad signature")

    try:
        payload = json.loads(raw)
        user_id = payload["user"]["id"]
        expires_at = float(payload["exp"])
    except (ValueError, KeyError, TypeError) as exc:
        raise InvalidTokenError(reason=f"bad payload: {exc}") from exc

    current = time.time() if now is None else now
    if expires_at <= current:
        raise TokenExpiredError()

    return Identity(user_id=user_id, expires_at=expires_at)
