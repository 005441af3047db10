"""
API request and response models for Hackers Auth REST endpoints.

These Pydantic v2 models define the HTTP transport contract for the API layer.
They are intentionally separate from the dataclasses in auth/models.py, which
own the internal domain representation. Route handlers map between the two.

Separation of concerns: auth/ models = domain truth; api/ models = API contract.
"""

from pydantic import BaseModel, ConfigDict, Field

from auth.models import User

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class LoginRequest(BaseModel):
    """Request body for POST /login.

    Both fields are required and must be non-empty; an empty string is
    rejected the same way as a missing field.
    """

    username: str = Field(min_length=1, examples=["betauser"])
    password: str = Field(min_length=1, examples=["betauser"])


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class UserResponse(BaseModel):
    """Public view of a user -- the password is never part of this model."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(examples=["betauser"])
    company: str = Field(examples=["acme global"])
    beta_access: bool = Field(examples=[True])

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(username=user.username, company=user.company, beta_access=user.beta_access)


class LoginResponse(BaseModel):
    """Response for a successful POST /login."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(examples=["eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."])
    user: UserResponse


class UserCredentials(BaseModel):
    """One entry in GET /users. Exposes the password on purpose (demo endpoint)."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(examples=["betauser"])
    password: str = Field(examples=["betauser"])


class ErrorResponse(BaseModel):
    """Error envelope shared by every failure response: {"error": "<message>"}."""

    error: str


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: str = "ok"
    version: str
