# performance_api/repositories/evaluation_repo.py
from sqlmodel import Session, select

from performance_api.models.evaluation import CoachEvaluation
from performance_api.models.user import User


class EvaluationRepository:
    """
    Data access layer for CoachEvaluation.
    """

    def list_for_player_with_coach(
        self,
        session: Session,
        player_id: int,
    ) -> list[tuple[CoachEvaluation, User | None]]:
        """
        Evaluations for a player, each paired with its authoring coach.

        Outer join so an evaluation never disappears from the listing
        because its author row is missing.
        """
        stmt = (
            select(CoachEvaluation, User)
            .join(User, User.id == CoachEvaluation.coach_id, isouter=True)
            .where(CoachEvaluation.player_id == player_id)
            .order_by(CoachEvaluation.created_at, CoachEvaluation.id)
        )
        return list(session.exec(stmt).all())

    def create(self, session: Session, evaluation: CoachEvaluation) -> CoachEvaluation:
        session.add(evaluation)
        session.commit()
        session.refresh(evaluation)
        return evaluation
