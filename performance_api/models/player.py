# performance_api/models/player.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Player(SQLModel, table=True):
    """
    Athlete profile.

    A player may or may not be linked to a registered identity
    (`user_id` is nullable, e.g. scouted prospects without a login).

    Children (stats, training sessions, evaluations) are removed together
    with the player.
    """

    __tablename__ = "players"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    name: str = Field(
        index=True,
        description="Player full name",
    )

    age: int | None = Field(default=None)

    position: str | None = Field(
        default=None,
        description="Field position, e.g. RW, CF, CM",
    )

    team: str | None = Field(default=None)

    user_id: int | None = Field(
        default=None,
        foreign_key="users.id",
        ondelete="SET NULL",
        index=True,
        description="Optional FK to users.id",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )
