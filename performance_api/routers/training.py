# performance_api/routers/training.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from performance_api.core.auth import policy_guard
from performance_api.database import get_session
from performance_api.repositories.player_repo import PlayerRepository
from performance_api.repositories.training_repo import TrainingRepository
from performance_api.schemas.training import TrainingSessionCreate, TrainingSessionRead
from performance_api.services.training_service import TrainingService

router = APIRouter(
    prefix="/api/training-sessions",
    tags=["Training Sessions"],
    dependencies=[Depends(policy_guard("training-sessions"))],
)

repo = TrainingRepository()
service = TrainingService(repo, PlayerRepository())


@router.get("/{player_id}", response_model=list[TrainingSessionRead])
def list_training_sessions(
    player_id: int,
    session: Session = Depends(get_session),
):
    return service.list_for_player(session, player_id)


@router.post(
    "",
    response_model=TrainingSessionRead,
    status_code=status.HTTP_201_CREATED,
)
def create_training_session(
    payload: TrainingSessionCreate,
    session: Session = Depends(get_session),
):
    """
    Log a training session (coach only). Requires playerId and date.
    """
    return service.create_session(session, payload)
