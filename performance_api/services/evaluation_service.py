# performance_api/services/evaluation_service.py
from sqlmodel import Session

from performance_api.core.errors import ValidationError
from performance_api.database import storage_errors
from performance_api.models.evaluation import CoachEvaluation
from performance_api.repositories.evaluation_repo import EvaluationRepository
from performance_api.repositories.player_repo import PlayerRepository
from performance_api.repositories.user_repo import UserRepository
from performance_api.schemas.evaluation import (
    CoachSummary,
    EvaluationCreate,
    EvaluationWithCoachRead,
)


class EvaluationService:
    """
    Coach evaluations.

    Responsibilities:
      - required fields: playerId, coachId, rating
      - both referenced rows (player, coach identity) must exist
      - listings embed the author's name and email
    """

    def __init__(
        self,
        repo: EvaluationRepository,
        player_repo: PlayerRepository,
        user_repo: UserRepository,
    ):
        self.repo = repo
        self.player_repo = player_repo
        self.user_repo = user_repo

    def list_for_player(
        self,
        session: Session,
        player_id: int,
    ) -> list[EvaluationWithCoachRead]:
        with storage_errors(session, "fetch evaluations"):
            rows = self.repo.list_for_player_with_coach(session, player_id)

        evaluations: list[EvaluationWithCoachRead] = []
        for evaluation, coach in rows:
            evaluations.append(
                EvaluationWithCoachRead(
                    **evaluation.model_dump(),
                    coach=CoachSummary(name=coach.name, email=coach.email) if coach else None,
                )
            )
        return evaluations

    def create_evaluation(
        self,
        session: Session,
        payload: EvaluationCreate,
    ) -> CoachEvaluation:
        if payload.player_id is None or payload.coach_id is None or payload.rating is None:
            raise ValidationError("playerId, coachId, and rating required")

        with storage_errors(session, "create evaluation"):
            if self.player_repo.get_by_id(session, payload.player_id) is None:
                raise ValidationError("playerId does not reference an existing player")
            if self.user_repo.get_by_id(session, payload.coach_id) is None:
                raise ValidationError("coachId does not reference an existing user")

            evaluation = CoachEvaluation(
                player_id=payload.player_id,
                coach_id=payload.coach_id,
                rating=payload.rating,
                strengths=payload.strengths,
                weaknesses=payload.weaknesses,
                comments=payload.comments,
            )
            return self.repo.create(session, evaluation)
