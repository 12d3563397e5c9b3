# performance_api/schemas/stat.py
from datetime import date, datetime

from sqlmodel import SQLModel, Field

from performance_api.schemas.common import REQUEST_CONFIG, RESPONSE_CONFIG


class StatCreate(SQLModel):
    """
    Payload for recording a match stat line.

    Required (checked by StatService): playerId, matchDate.
    goals/assists default to 0; passAccuracy is a percentage.
    """

    model_config = REQUEST_CONFIG

    player_id: int | None = None
    goals: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    pass_accuracy: float | None = Field(default=None, ge=0, le=100)
    minutes_played: int | None = Field(default=None, ge=0)
    match_date: date | None = None


class StatRead(SQLModel):
    model_config = RESPONSE_CONFIG

    id: int
    player_id: int
    goals: int
    assists: int
    pass_accuracy: float | None
    minutes_played: int | None
    match_date: date
    created_at: datetime
    updated_at: datetime
