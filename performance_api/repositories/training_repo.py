# performance_api/repositories/training_repo.py
from sqlmodel import Session, select

from performance_api.models.training import TrainingSession


class TrainingRepository:

    def list_for_player(self, session: Session, player_id: int) -> list[TrainingSession]:
        stmt = (
            select(TrainingSession)
            .where(TrainingSession.player_id == player_id)
            .order_by(TrainingSession.date, TrainingSession.id)
        )
        return session.exec(stmt).all()

    def create(self, session: Session, training: TrainingSession) -> TrainingSession:
        session.add(training)
        session.commit()
        session.refresh(training)
        return training
