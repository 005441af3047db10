"""
api/routes/users.py -- Demo credential discovery endpoint.

Routes:
  GET /users -- every account in the store with its plaintext password

This endpoint exists so demo clients can discover which credentials to try.
It requires no authentication and never fails.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from api.models import UserCredentials
from auth.store import UserStore

router = APIRouter()


@router.get(
    "/users",
    response_model=list[UserCredentials],
    summary="List all users",
    description="Returns a list of all available users with their credentials (for demo purposes only)",
)
def list_users(request: Request) -> list[UserCredentials]:
    """Return username/password pairs in store order."""
    user_store: UserStore = request.app.state.user_store
    return [UserCredentials(username=u.username, password=u.password) for u in user_store.list_users()]
