# performance_api/models/evaluation.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class CoachEvaluation(SQLModel, table=True):
    """
    Coach's assessment of a player.

    Child of both the player and the authoring identity; removed when
    either parent goes away.
    """

    __tablename__ = "coach_evaluations"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    player_id: int = Field(
        foreign_key="players.id",
        ondelete="CASCADE",
        index=True,
    )

    coach_id: int = Field(
        foreign_key="users.id",
        ondelete="CASCADE",
        index=True,
    )

    rating: int = Field(
        ge=1,
        le=10,
        description="Overall rating on a 1-10 scale",
    )

    strengths: str | None = Field(default=None)

    weaknesses: str | None = Field(default=None)

    comments: str | None = Field(default=None)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
