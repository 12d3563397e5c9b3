# performance_api/routers/evaluations.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from performance_api.core.auth import policy_guard
from performance_api.database import get_session
from performance_api.repositories.evaluation_repo import EvaluationRepository
from performance_api.repositories.player_repo import PlayerRepository
from performance_api.repositories.user_repo import UserRepository
from performance_api.schemas.evaluation import EvaluationCreate, EvaluationRead, EvaluationWithCoachRead
from performance_api.services.evaluation_service import EvaluationService

router = APIRouter(
    prefix="/api/evaluations",
    tags=["Coach Evaluations"],
    dependencies=[Depends(policy_guard("evaluations"))],
)

repo = EvaluationRepository()
service = EvaluationService(repo, PlayerRepository(), UserRepository())


@router.get("/{player_id}", response_model=list[EvaluationWithCoachRead])
def list_evaluations(
    player_id: int,
    session: Session = Depends(get_session),
):
    """
    Evaluations for a player, each with the coach's name and email.
    """
    return service.list_for_player(session, player_id)


@router.post(
    "",
    response_model=EvaluationRead,
    status_code=status.HTTP_201_CREATED,
)
def create_evaluation(
    payload: EvaluationCreate,
    session: Session = Depends(get_session),
):
    """
    Create an evaluation (coach only). Requires playerId, coachId and rating (1-10).
    """
    return service.create_evaluation(session, payload)
