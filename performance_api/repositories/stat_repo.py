# performance_api/repositories/stat_repo.py
from sqlmodel import Session, select

from performance_api.models.stat import PerformanceStat


class StatRepository:

    def list_for_player(self, session: Session, player_id: int) -> list[PerformanceStat]:
        stmt = (
            select(PerformanceStat)
            .where(PerformanceStat.player_id == player_id)
            .order_by(PerformanceStat.match_date, PerformanceStat.id)
        )
        return session.exec(stmt).all()

    def create(self, session: Session, stat: PerformanceStat) -> PerformanceStat:
        session.add(stat)
        session.commit()
        session.refresh(stat)
        return stat
