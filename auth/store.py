"""
auth/store.py -- Read-only in-memory credential store.

Pattern: Repository. UserStore owns the user records; route code never
touches the underlying sequence directly.

The records are built once (at lifespan startup) and held as a tuple of frozen
dataclasses, so concurrent readers need no locking: there is no writer after
construction.

Layer rule: no imports from api/ or core/.
"""

from __future__ import annotations

from collections.abc import Iterable

from auth.models import User

# ---------------------------------------------------------------------------
# Seed data -- store order is the order GET /users reports
# ---------------------------------------------------------------------------

DEFAULT_USERS: tuple[User, ...] = (
    User(
        username="betauser",
        password="betauser",
        company="acme global",
        beta_access=True,
    ),
    User(
        username="normaluser",
        password="normaluser",
        company="generic co",
        beta_access=False,
    ),
)


class UserStore:
    """Ordered, immutable collection of demo users."""

    def __init__(self, users: Iterable[User] = DEFAULT_USERS) -> None:
        self._users: tuple[User, ...] = tuple(users)
        seen: set[str] = set()
        for user in self._users:
            if user.username in seen:
                raise ValueError(f"Duplicate username in credential store: {user.username!r}")
            seen.add(user.username)

    def find_user(self, username: str, password: str) -> User | None:
        """Return the first user whose username and password both match exactly.

        Comparison is case-sensitive with no normalization. Unknown username
        and wrong password are indistinguishable to the caller: both return
        None.
        """
        for user in self._users:
            if user.username == username and user.password == password:
                return user
        return None

    def list_users(self) -> tuple[User, ...]:
        """Return every user in store order."""
        return self._users

    def count(self) -> int:
        return len(self._users)
