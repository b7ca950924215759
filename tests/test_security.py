"""Tests for the token service and password hashing."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from docvault.config import settings
from docvault.errors import ConfigurationError, InvalidTokenError
from docvault.utils import security
from docvault.utils.security import (
    hash_password,
    issue_token,
    verify_password,
    verify_token,
)


class TestIssueAndVerify:
    def test_round_trip_carries_user_id(self):
        payload = verify_token(issue_token(42))
        assert payload.user_id == 42

    def test_expiry_is_one_hour_after_issue(self):
        now = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        token = issue_token(7, now=now)
        payload = verify_token(token, now=now + timedelta(minutes=1))
        assert payload.issued_at == now
        assert payload.expires_at - payload.issued_at == timedelta(hours=1)

    def test_claims_are_standard_jwt(self):
        claims = jwt.get_unverified_claims(issue_token(5))
        assert claims["userId"] == 5
        assert claims["sub"] == "5"
        assert claims["exp"] - claims["iat"] == 3600
        assert security.TOKEN_TTL == timedelta(hours=1)


class TestRejection:
    def test_expired_token_is_rejected(self):
        two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
        with pytest.raises(InvalidTokenError):
            verify_token(issue_token(1, now=two_hours_ago))

    def test_token_is_rejected_exactly_at_expiry(self):
        now = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        token = issue_token(1, now=now)
        verify_token(token, now=now + timedelta(minutes=59, seconds=59))
        with pytest.raises(InvalidTokenError):
            verify_token(token, now=now + timedelta(hours=1))

    def test_tampered_signature_is_rejected(self):
        token = issue_token(1)
        head, body, sig = token.split(".")
        forged = ".".join([head, body, ("B" if sig[0] == "A" else "A") + sig[1:]])
        with pytest.raises(InvalidTokenError):
            verify_token(forged)

    def test_token_from_another_secret_is_rejected(self):
        now = int(datetime.now(timezone.utc).timestamp())
        foreign = jwt.encode({"userId": 1, "iat": now, "exp": now + 3600}, "other-secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            verify_token(foreign)

    def test_payload_without_user_id_is_rejected(self):
        now = int(datetime.now(timezone.utc).timestamp())
        token = jwt.encode({"sub": "1", "iat": now, "exp": now + 3600}, settings.jwt_secret, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            verify_token(token)

    def test_non_integer_user_id_is_rejected(self):
        now = int(datetime.now(timezone.utc).timestamp())
        token = jwt.encode({"userId": "1", "iat": now, "exp": now + 3600}, settings.jwt_secret, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            verify_token(token)

    def test_garbage_is_rejected(self):
        with pytest.raises(InvalidTokenError):
            verify_token("not-a-jwt")


def test_missing_secret_is_a_configuration_error(monkeypatch):
    monkeypatch.setattr(settings, "jwt_secret", None)
    with pytest.raises(ConfigurationError):
        issue_token(1)
    with pytest.raises(ConfigurationError):
        security.require_secret()


def test_password_hash_round_trip():
    hashed = hash_password("hunter22")
    assert hashed != "hunter22"
    assert verify_password("hunter22", hashed)
    assert not verify_password("hunter23", hashed)


def test_password_hash_is_salted():
    assert hash_password("same-password") != hash_password("same-password")
