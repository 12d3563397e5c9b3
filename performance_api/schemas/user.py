# performance_api/schemas/user.py
from typing import Literal

from pydantic import EmailStr, field_validator
from sqlmodel import SQLModel, Field

from performance_api.schemas.common import REQUEST_CONFIG, RESPONSE_CONFIG, blank_to_none

# App-level roles. Fixed at registration.
Role = Literal["player", "coach"]


class RegisterRequest(SQLModel):
    """
    Payload for POST /auth/register.

    name/email/password are declared optional so that a missing field is
    reported by the auth service with a single "required" message instead
    of a per-field schema error.
    """

    model_config = REQUEST_CONFIG

    name: str | None = Field(default=None, max_length=50)
    email: EmailStr | None = None
    password: str | None = None
    role: Role | None = None

    @field_validator("name", "password", mode="before")
    @classmethod
    def normalize_blank(cls, v):
        if isinstance(v, str):
            return blank_to_none(v)
        return v


class LoginRequest(SQLModel):
    model_config = REQUEST_CONFIG

    email: str | None = None
    password: str | None = None


class UserSummary(SQLModel):
    """Non-secret identity fields returned after registration."""

    model_config = RESPONSE_CONFIG

    id: int
    name: str
    email: str


class UserRead(UserSummary):
    """Identity as returned on login (adds the role)."""

    role: Role


class RegisterResponse(SQLModel):
    model_config = RESPONSE_CONFIG

    message: str
    user: UserSummary


class LoginResponse(SQLModel):
    model_config = RESPONSE_CONFIG

    message: str
    token: str
    user: UserRead


class MessageResponse(SQLModel):
    message: str
