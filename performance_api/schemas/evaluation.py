# performance_api/schemas/evaluation.py
from datetime import datetime

from sqlmodel import SQLModel, Field

from performance_api.schemas.common import REQUEST_CONFIG, RESPONSE_CONFIG


class EvaluationCreate(SQLModel):
    """
    Payload for a coach evaluation (coach only).

    Required (checked by EvaluationService): playerId, coachId, rating.
    rating must be within 1..10 when present.
    """

    model_config = REQUEST_CONFIG

    player_id: int | None = None
    coach_id: int | None = None
    rating: int | None = Field(default=None, ge=1, le=10)
    strengths: str | None = None
    weaknesses: str | None = None
    comments: str | None = None


class CoachSummary(SQLModel):
    """Author info embedded in evaluation listings."""

    model_config = RESPONSE_CONFIG

    name: str
    email: str


class EvaluationRead(SQLModel):
    model_config = RESPONSE_CONFIG

    id: int
    player_id: int
    coach_id: int
    rating: int
    strengths: str | None
    weaknesses: str | None
    comments: str | None
    created_at: datetime
    updated_at: datetime


class EvaluationWithCoachRead(EvaluationRead):
    coach: CoachSummary | None = None
