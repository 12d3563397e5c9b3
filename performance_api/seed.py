# performance_api/seed.py
"""
Reset the configured database and load sample data.

    python -m performance_api.seed

Creates one coach and two player identities, three player profiles (one of
them a scouted prospect without a login), plus a few stats, training
sessions and evaluations.
"""
import logging
from datetime import date

from sqlmodel import Session

from performance_api.core.security import hash_password
from performance_api.database import create_db_and_tables, drop_db_and_tables, engine
from performance_api.models.evaluation import CoachEvaluation
from performance_api.models.player import Player
from performance_api.models.stat import PerformanceStat
from performance_api.models.training import TrainingSession
from performance_api.models.user import User

logger = logging.getLogger(__name__)


def seed(session: Session) -> None:
    coach = User(
        name="Coach Carter",
        email="coach@example.com",
        password_hash=hash_password("coach123"),
        role="coach",
    )
    messi_user = User(
        name="Lionel Messi",
        email="messi@example.com",
        password_hash=hash_password("goat123"),
        role="player",
    )
    ronaldo_user = User(
        name="Cristiano Ronaldo",
        email="ronaldo@example.com",
        password_hash=hash_password("cr7pass"),
        role="player",
    )
    session.add_all([coach, messi_user, ronaldo_user])
    session.flush()
    logger.info("Sample users inserted.")

    messi = Player(name="Lionel Messi", age=36, position="RW", team="Inter Miami", user_id=messi_user.id)
    ronaldo = Player(name="Cristiano Ronaldo", age=38, position="CF", team="Al Nassr", user_id=ronaldo_user.id)
    mbappe = Player(name="Kylian Mbappé", age=25, position="LW", team="PSG", user_id=None)
    session.add_all([messi, ronaldo, mbappe])
    session.flush()
    logger.info("Sample player profiles inserted.")

    session.add_all(
        [
            PerformanceStat(player_id=messi.id, goals=2, assists=1, pass_accuracy=91.5,
                            minutes_played=90, match_date=date(2025, 10, 1)),
            PerformanceStat(player_id=messi.id, goals=0, assists=2, pass_accuracy=88.0,
                            minutes_played=85, match_date=date(2025, 10, 8)),
            PerformanceStat(player_id=ronaldo.id, goals=1, assists=0, pass_accuracy=79.4,
                            minutes_played=90, match_date=date(2025, 10, 2)),
            PerformanceStat(player_id=mbappe.id, goals=3, assists=0, pass_accuracy=84.2,
                            minutes_played=90, match_date=date(2025, 10, 3)),
        ]
    )
    session.add_all(
        [
            TrainingSession(player_id=messi.id, date=date(2025, 10, 5), duration=60,
                            workout_type="Technical", notes="Free kick drills"),
            TrainingSession(player_id=ronaldo.id, date=date(2025, 10, 6), duration=75,
                            workout_type="Strength", notes="Lower body focus"),
            TrainingSession(player_id=mbappe.id, date=date(2025, 10, 6), duration=45,
                            workout_type="Speed", notes="Sprint intervals"),
        ]
    )
    session.add_all(
        [
            CoachEvaluation(player_id=messi.id, coach_id=coach.id, rating=10,
                            strengths="Vision, dribbling", weaknesses="Aerial duels",
                            comments="Still decisive in the final third."),
            CoachEvaluation(player_id=ronaldo.id, coach_id=coach.id, rating=9,
                            strengths="Finishing, heading", weaknesses="Pressing",
                            comments="Elite movement in the box."),
        ]
    )
    session.commit()
    logger.info("Sample stats, training sessions and evaluations inserted.")


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    drop_db_and_tables()
    create_db_and_tables()
    logger.info("Database tables created successfully.")
    with Session(engine) as session:
        seed(session)
    logger.info("Database seeded successfully.")


if __name__ == "__main__":
    main()
