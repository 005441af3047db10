"""
auth/tokens.py -- JWT issuing and verification.

Security design decisions:
  JWT: python-jose with HS256. Tokens are signed with SECRET_KEY and carry
       username, company, beta_access, and expiry. Nothing is stored
       server-side; a token is valid for as long as its signature and exp
       check out.

  Verification: decode_access_token() returns None on any failure. This
       service never enforces tokens itself -- downstream consumers holding
       the same key do.

  SECRET_KEY: sourced from core.config.get_settings(). The Settings class
       validates the key at startup: dev mode (DEBUG=true) auto-generates a
       random key with a warning; production mode refuses to start without one.

Layer rule: no imports from api/. Import from core/ is allowed -- core/ is the
kernel and has no reverse dependencies.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from jose import JOSEError, JWTError, jwt

from core.config import get_settings

if TYPE_CHECKING:
    from auth.models import User

logger = logging.getLogger("hackersauth.auth")

# ---------------------------------------------------------------------------
# Config -- read once at module load via the lru_cache singleton
# ---------------------------------------------------------------------------

_settings = get_settings()

_ALGORITHM = "HS256"


class TokenIssueError(Exception):
    """Raised when a token cannot be encoded or signed."""


# ---------------------------------------------------------------------------
# JWT encode / decode
# ---------------------------------------------------------------------------


def build_claims(user: User, issued_at: datetime | None = None) -> dict:
    """Return the claim set for a user, expiring token_expire_seconds after issued_at."""
    issued_at = issued_at or datetime.now(timezone.utc)
    return {
        "username": user.username,
        "company": user.company,
        "beta_access": user.beta_access,
        "exp": issued_at + timedelta(seconds=_settings.token_expire_seconds),
    }


def create_access_token(user: User) -> str:
    """Encode a signed JWT carrying the user's identity and entitlement claims.

    Raises:
        TokenIssueError: if python-jose fails to encode or sign the claims.
            The route layer turns this into a 500.
    """
    claims = build_claims(user)
    try:
        return jwt.encode(claims, _settings.secret_key, algorithm=_ALGORITHM)
    except (JOSEError, TypeError, ValueError) as exc:
        logger.error("Token signing failed for %s: %s", user.username, exc)
        raise TokenIssueError(f"could not sign token for {user.username!r}") from exc


def decode_access_token(token: str) -> dict | None:
    """Decode and verify a JWT. Returns the claims dict or None on any failure.

    Signature and exp are both checked by python-jose. A token missing the
    identity claims is treated as invalid.
    """
    try:
        payload = jwt.decode(token, _settings.secret_key, algorithms=[_ALGORITHM])
    except JWTError:
        return None
    if "username" not in payload or "beta_access" not in payload:
        return None
    return payload
