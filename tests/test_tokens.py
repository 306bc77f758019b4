"""
Tests for bearer token issuance and verification.
"""

import base64
import json
import uuid

import pytest

from auth.tokens import TokenService
from utils.errors import UnauthorizedError

SECRET = "unit-test-secret-unit-test-secret-0000"


def _b64(data: dict) -> str:
    raw = json.dumps(data).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


class TestTokenService:
    def test_round_trip_yields_identity(self):
        service = TokenService(SECRET)
        user_id = uuid.uuid4()

        claims = service.verify(service.issue(user_id, "a@example.com"))

        assert claims.user_id == user_id
        assert claims.email == "a@example.com"

    def test_expiry_window_comes_from_configuration(self):
        service = TokenService(SECRET, expiry_seconds=3600)
        claims = service.verify(service.issue(uuid.uuid4(), "a@example.com"))
        other = TokenService(SECRET, expiry_seconds=7200)
        later = other.verify(other.issue(uuid.uuid4(), "a@example.com"))
        delta = (later.expires_at - claims.expires_at).total_seconds()
        assert 3500 < delta < 3700

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            TokenService("")

    def test_wrong_secret_rejected(self):
        token = TokenService("another-secret-another-secret-000").issue(uuid.uuid4(), "a@example.com")
        with pytest.raises(UnauthorizedError) as exc_info:
            TokenService(SECRET).verify(token)
        assert exc_info.value.message == "Invalid token"

    def test_tampered_payload_rejected(self):
        service = TokenService(SECRET)
        header, _, signature = service.issue(uuid.uuid4(), "a@example.com").split(".")
        forged = ".".join([header, _b64({"sub": str(uuid.uuid4()), "email": "x@example.com", "exp": 9999999999}), signature])

        with pytest.raises(UnauthorizedError) as exc_info:
            service.verify(forged)
        assert exc_info.value.message == "Invalid token"

    def test_expired_token_rejected_with_same_error(self):
        service = TokenService(SECRET, expiry_seconds=-10)
        token = service.issue(uuid.uuid4(), "a@example.com")

        with pytest.raises(UnauthorizedError) as exc_info:
            service.verify(token)
        assert exc_info.value.message == "Invalid token"
        assert exc_info.value.status_code == 401

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "Bearer x.y.z"])
    def test_malformed_tokens_rejected(self, token):
        with pytest.raises(UnauthorizedError, match="Invalid token"):
            TokenService(SECRET).verify(token)

    def test_non_uuid_subject_rejected(self):
        import jwt

        token = jwt.encode({"sub": "42", "email": "a@example.com", "exp": 9999999999}, SECRET, algorithm="HS256")
        with pytest.raises(UnauthorizedError, match="Invalid token"):
            TokenService(SECRET).verify(token)
