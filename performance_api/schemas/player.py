# performance_api/schemas/player.py
from datetime import datetime

from pydantic import field_validator
from sqlmodel import SQLModel, Field

from performance_api.schemas.common import REQUEST_CONFIG, RESPONSE_CONFIG, blank_to_none


class PlayerCreate(SQLModel):
    """
    Payload for creating a player profile.

    - name is required (checked by PlayerService so the error is uniform).
    - userId optionally links the profile to a registered identity.
    """

    model_config = REQUEST_CONFIG

    name: str | None = None
    age: int | None = Field(default=None, ge=0)
    position: str | None = None
    team: str | None = None
    user_id: int | None = None

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, v):
        if isinstance(v, str):
            return blank_to_none(v)
        return v


class PlayerUpdate(SQLModel):
    """
    Partial update payload for players.
    Only fields present in the request body are written.
    """

    model_config = REQUEST_CONFIG

    name: str | None = None
    age: int | None = Field(default=None, ge=0)
    position: str | None = None
    team: str | None = None
    user_id: int | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not v.strip():
            raise ValueError("name cannot be empty")
        return v


class PlayerRead(SQLModel):
    model_config = RESPONSE_CONFIG

    id: int
    name: str
    age: int | None
    position: str | None
    team: str | None
    user_id: int | None
    created_at: datetime
    updated_at: datetime
