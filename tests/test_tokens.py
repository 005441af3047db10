"""
tests/test_tokens.py -- Unit tests for JWT issuing and verification.

Covers:
  - Claim set contents and 24h expiry
  - create_access_token output verifies with the configured key
  - decode_access_token rejects expired, tampered, foreign-key, and
    claim-less tokens
  - TokenIssueError wraps python-jose failures
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from jose import JWSError, jwt

from auth import tokens
from auth.models import User
from auth.tokens import TokenIssueError, build_claims, create_access_token, decode_access_token
from core.config import get_settings

BETA = User(username="betauser", password="betauser", company="acme global", beta_access=True)


class TestBuildClaims:
    def test_claims_contents(self) -> None:
        issued = datetime(2024, 1, 1, tzinfo=timezone.utc)
        claims = build_claims(BETA, issued_at=issued)
        assert claims["username"] == "betauser"
        assert claims["company"] == "acme global"
        assert claims["beta_access"] is True
        assert claims["exp"] == issued + timedelta(hours=24)

    def test_password_not_in_claims(self) -> None:
        claims = build_claims(BETA)
        assert "password" not in claims


class TestCreateAccessToken:
    def test_token_verifies_with_configured_key(self) -> None:
        token = create_access_token(BETA)
        payload = jwt.decode(token, get_settings().secret_key, algorithms=["HS256"])
        assert payload["username"] == "betauser"
        assert payload["beta_access"] is True

    def test_header_is_hs256(self) -> None:
        token = create_access_token(BETA)
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_exp_is_epoch_seconds(self) -> None:
        now = int(datetime.now(timezone.utc).timestamp())
        payload = jwt.get_unverified_claims(create_access_token(BETA))
        assert isinstance(payload["exp"], int)
        assert abs(payload["exp"] - (now + 24 * 60 * 60)) <= 5

    def test_signing_failure_raises_token_issue_error(self, monkeypatch) -> None:
        def _broken_encode(*args, **kwargs):
            raise JWSError("bad key")

        monkeypatch.setattr(tokens.jwt, "encode", _broken_encode)
        with pytest.raises(TokenIssueError):
            create_access_token(BETA)


class TestDecodeAccessToken:
    def test_round_trip(self) -> None:
        payload = decode_access_token(create_access_token(BETA))
        assert payload is not None
        assert payload["company"] == "acme global"

    def test_expired_token_rejected(self) -> None:
        claims = build_claims(BETA, issued_at=datetime.now(timezone.utc) - timedelta(days=2))
        token = jwt.encode(claims, get_settings().secret_key, algorithm="HS256")
        assert decode_access_token(token) is None

    def test_foreign_key_rejected(self) -> None:
        token = jwt.encode(build_claims(BETA), "x" * 40, algorithm="HS256")
        assert decode_access_token(token) is None

    def test_tampered_token_rejected(self) -> None:
        """A payload swapped in from another user's token fails the signature check."""
        normal = User(username="normaluser", password="normaluser", company="generic co")
        header, _, signature = create_access_token(normal).split(".")
        _, beta_payload, _ = create_access_token(BETA).split(".")
        assert decode_access_token(".".join([header, beta_payload, signature])) is None

    def test_missing_identity_claims_rejected(self) -> None:
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            get_settings().secret_key,
            algorithm="HS256",
        )
        assert decode_access_token(token) is None

    def test_garbage_rejected(self) -> None:
        assert decode_access_token("not-a-jwt") is None
