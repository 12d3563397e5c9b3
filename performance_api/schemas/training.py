# performance_api/schemas/training.py
import datetime as dt

from sqlmodel import SQLModel, Field

from performance_api.schemas.common import REQUEST_CONFIG, RESPONSE_CONFIG


class TrainingSessionCreate(SQLModel):
    """
    Payload for logging a training session (coach only).

    Required (checked by TrainingService): playerId, date.
    """

    model_config = REQUEST_CONFIG

    player_id: int | None = None
    date: dt.date | None = None
    duration: int | None = Field(default=None, ge=0)
    workout_type: str | None = None
    notes: str | None = None


class TrainingSessionRead(SQLModel):
    model_config = RESPONSE_CONFIG

    id: int
    player_id: int
    date: dt.date
    duration: int | None
    workout_type: str | None
    notes: str | None
    created_at: dt.datetime
    updated_at: dt.datetime
