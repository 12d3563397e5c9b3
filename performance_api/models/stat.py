# performance_api/models/stat.py
from datetime import date, datetime, timezone

from sqlmodel import SQLModel, Field


class PerformanceStat(SQLModel, table=True):
    """
    Match performance line for one player on one match date.
    """

    __tablename__ = "performance_stats"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    player_id: int = Field(
        foreign_key="players.id",
        ondelete="CASCADE",
        index=True,
    )

    goals: int = Field(default=0)

    assists: int = Field(default=0)

    # Percentage of completed passes
    pass_accuracy: float | None = Field(
        default=None,
        ge=0,
        le=100,
    )

    minutes_played: int | None = Field(default=None)

    match_date: date = Field(
        description="Match day (date only)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
