# performance_api/services/stat_service.py
from sqlmodel import Session

from performance_api.core.errors import ValidationError
from performance_api.database import storage_errors
from performance_api.models.stat import PerformanceStat
from performance_api.repositories.player_repo import PlayerRepository
from performance_api.repositories.stat_repo import StatRepository
from performance_api.schemas.stat import StatCreate


class StatService:
    """
    Match performance stats for a player.
    """

    def __init__(self, repo: StatRepository, player_repo: PlayerRepository):
        self.repo = repo
        self.player_repo = player_repo

    def list_for_player(self, session: Session, player_id: int) -> list[PerformanceStat]:
        """Stats for a player; an unknown player simply has none."""
        with storage_errors(session, "fetch stats"):
            return self.repo.list_for_player(session, player_id)

    def create_stat(self, session: Session, payload: StatCreate) -> PerformanceStat:
        if payload.player_id is None or payload.match_date is None:
            raise ValidationError("playerId and matchDate required")

        with storage_errors(session, "create stat"):
            if self.player_repo.get_by_id(session, payload.player_id) is None:
                raise ValidationError("playerId does not reference an existing player")

            stat = PerformanceStat(
                player_id=payload.player_id,
                goals=payload.goals,
                assists=payload.assists,
                pass_accuracy=payload.pass_accuracy,
                minutes_played=payload.minutes_played,
                match_date=payload.match_date,
            )
            return self.repo.create(session, stat)
