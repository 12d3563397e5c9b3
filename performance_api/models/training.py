# performance_api/models/training.py
import datetime as dt

from sqlmodel import SQLModel, Field


class TrainingSession(SQLModel, table=True):
    """
    Training session logged for a player (coach-authored).
    """

    __tablename__ = "training_sessions"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    player_id: int = Field(
        foreign_key="players.id",
        ondelete="CASCADE",
        index=True,
    )

    date: dt.date

    # minutes
    duration: int | None = Field(default=None)

    workout_type: str | None = Field(
        default=None,
        description="e.g. Endurance, Speed, Technical",
    )

    notes: str | None = Field(default=None)

    created_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.timezone.utc),
    )

    updated_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.timezone.utc),
    )
