# performance_api/services/training_service.py
from sqlmodel import Session

from performance_api.core.errors import ValidationError
from performance_api.database import storage_errors
from performance_api.models.training import TrainingSession
from performance_api.repositories.player_repo import PlayerRepository
from performance_api.repositories.training_repo import TrainingRepository
from performance_api.schemas.training import TrainingSessionCreate


class TrainingService:
    """
    Training sessions. Creation is coach-only (enforced at the router).
    """

    def __init__(self, repo: TrainingRepository, player_repo: PlayerRepository):
        self.repo = repo
        self.player_repo = player_repo

    def list_for_player(self, session: Session, player_id: int) -> list[TrainingSession]:
        with storage_errors(session, "fetch training sessions"):
            return self.repo.list_for_player(session, player_id)

    def create_session(
        self,
        session: Session,
        payload: TrainingSessionCreate,
    ) -> TrainingSession:
        if payload.player_id is None or payload.date is None:
            raise ValidationError("playerId and date required")

        with storage_errors(session, "create session"):
            if self.player_repo.get_by_id(session, payload.player_id) is None:
                raise ValidationError("playerId does not reference an existing player")

            training = TrainingSession(
                player_id=payload.player_id,
                date=payload.date,
                duration=payload.duration,
                workout_type=payload.workout_type,
                notes=payload.notes,
            )
            return self.repo.create(session, training)
