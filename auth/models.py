"""
auth/models.py -- Domain dataclasses for authentication entities.

Pattern: Data class (pure data container, zero logic). The store and the
route layer do the work; API response shapes live in api/models.py.

Layer rule: no imports from api/ or core/.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A demo account in the credential store.

    frozen=True: records are created once at startup and never mutated, so
    they can be shared across request handlers without copying.

    password is plaintext. This service is a credential-discovery demo and
    GET /users deliberately returns it; the login response never does.
    """

    username: str  # unique, case-sensitive
    password: str
    company: str
    beta_access: bool = False
