# performance_api/repositories/player_repo.py
from sqlalchemy import delete
from sqlmodel import Session, select

from performance_api.models.evaluation import CoachEvaluation
from performance_api.models.player import Player
from performance_api.models.stat import PerformanceStat
from performance_api.models.training import TrainingSession


class PlayerRepository:
    """
    Data access layer for Player.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    def get_by_id(self, session: Session, player_id: int) -> Player | None:
        return session.get(Player, player_id)

    def list(self, session: Session) -> list[Player]:
        stmt = select(Player).order_by(Player.id)
        return session.exec(stmt).all()

    def create(self, session: Session, player: Player) -> Player:
        session.add(player)
        session.commit()
        session.refresh(player)
        return player

    def update(self, session: Session, player: Player) -> Player:
        session.add(player)
        session.commit()
        session.refresh(player)
        return player

    def delete(self, session: Session, player: Player) -> None:
        """
        Delete a player together with its stats, training sessions and
        evaluations in a single commit.
        """
        for child in (PerformanceStat, TrainingSession, CoachEvaluation):
            session.exec(delete(child).where(child.player_id == player.id))
        session.delete(player)
        session.commit()
