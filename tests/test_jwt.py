"""
Tests for token issuance and verification.
"""

import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode

import pytest

from auth.errors import InvalidTokenError, TokenExpiredError
from auth.jwt import create_token, verify_token
from auth.models import Identity

SECRET = "test-secret"


class TestCreateToken:
    def test_payload_wraps_user_id(self):
        token = create_token(42, secret=SECRET, expires_in=60, now=1_000)
        payload = json.loads(urlsafe_b64decode(token.split(".", 1)[0]))
        assert payload == {"user": {"id": 42}, "iat": 1_000, "exp": 1_060}

    def test_default_lifetime_is_a_day(self):
        token = create_token(1, secret=SECRET, now=0)
        payload = json.loads(urlsafe_b64decode(token.split(".", 1)[0]))
        assert payload["exp"] == 86400


class TestVerifyToken:
    def test_roundtrip_yields_identity(self):
        token = create_token(7, secret=SECRET)
        identity = verify_token(token, secret=SECRET)
        assert isinstance(identity, Identity)
        assert identity.user_id == 7

    def test_valid_until_expiry(self):
        token = create_token(7, secret=SECRET, expires_in=60, now=1_000)
        assert verify_token(token, secret=SECRET, now=1_059).user_id == 7

    def test_rejected_after_expiry(self):
        token = create_token(7, secret=SECRET, expires_in=60, now=1_000)
        with pytest.raises(TokenExpiredError):
            verify_token(token, secret=SECRET, now=1_060)

    def test_tampered_signature(self):
        token = create_token(7, secret=SECRET)
        body, sig = token.split(".", 1)
        flipped = ("0" if sig[0] != "0" else "1") + sig[1:]
        with pytest.raises(InvalidTokenError) as exc_info:
            verify_token(f"{body}.{flipped}", secret=SECRET)
        assert not isinstance(exc_info.value, TokenExpiredError)

    def test_tampered_payload(self):
        token = create_token(7, secret=SECRET)
        _, sig = token.split(".", 1)
        forged = json.dumps({"user": {"id": 1}, "iat": 0, "exp": time.time() + 600}).encode()
        with pytest.raises(InvalidTokenError):
            verify_token(urlsafe_b64encode(forged).decode() + "." + sig, secret=SECRET)

    def test_wrong_secret(self):
        token = create_token(7, secret=SECRET)
        with pytest.raises(InvalidTokenError):
            verify_token(token, secret="another-secret")

    @pytest.mark.parametrize("token", ["", "no-dot", "!!!.abc", "abc.déf"])
    def test_garbage_rejected(self, token):
        with pytest.raises(InvalidTokenError):
            verify_token(token, secret=SECRET)
