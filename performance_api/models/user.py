# performance_api/models/user.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Registered identity (credential store row).

    Role:
      - "player" | "coach"
      - fixed at registration; there is no promotion endpoint.

    `password_hash` is a salted bcrypt hash and must never leave the
    service layer; every read schema omits it.
    """

    __tablename__ = "users"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    email: str = Field(
        unique=True,
        index=True,
        description="Login email (unique)",
    )

    name: str = Field(
        max_length=50,
        description="Display name",
    )

    password_hash: str = Field(
        description="bcrypt hash of the password",
    )

    role: str = Field(
        default="player",
        index=True,
        description="Application role: player | coach",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )
