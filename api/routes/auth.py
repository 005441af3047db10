"""
api/routes/auth.py -- Password login endpoint.

Routes:
  POST /login -- validate credentials against the in-memory store; return a
                 signed JWT plus the public user profile

Error mapping (every body is the {"error": "<message>"} envelope):
  400 Invalid request          -- body missing, malformed, or a field empty
                                  (raised by FastAPI as RequestValidationError,
                                  translated in api/main.py)
  401 Invalid credentials      -- unknown username OR wrong password; the two
                                  cases are deliberately indistinguishable
  500 Could not generate token -- TokenIssueError from auth.tokens

Security:
  Cache-Control: no-store on every login response so tokens are not cached
  by intermediaries.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from api.models import ErrorResponse, LoginRequest, LoginResponse, UserResponse
from auth.store import UserStore
from auth.tokens import TokenIssueError, create_access_token

logger = logging.getLogger("hackersauth.api")

# Auth policy:
# - POST /login: public -- the login endpoint must be unauthenticated
router = APIRouter()

_NO_STORE = {"Cache-Control": "no-store"}


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login user",
    description="Authenticate user and return JWT token",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def login(request: Request, body: LoginRequest) -> JSONResponse:
    """Authenticate with username and password; return a signed token.

    Returns the same error for wrong username and wrong password to avoid
    leaking username existence information.
    """
    user_store: UserStore = request.app.state.user_store
    user = user_store.find_user(body.username, body.password)
    if user is None:
        logger.info("Login rejected")
        raise HTTPException(status_code=401, detail="Invalid credentials", headers=_NO_STORE)

    try:
        token = create_access_token(user)
    except TokenIssueError as exc:
        raise HTTPException(status_code=500, detail="Could not generate token", headers=_NO_STORE) from exc

    logger.info("Login succeeded for %s", user.username)
    resp = JSONResponse(
        status_code=200,
        content=LoginResponse(token=token, user=UserResponse.from_user(user)).model_dump(),
    )
    resp.headers.update(_NO_STORE)
    return resp
