# performance_api/routers/stats.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from performance_api.core.auth import policy_guard
from performance_api.database import get_session
from performance_api.repositories.player_repo import PlayerRepository
from performance_api.repositories.stat_repo import StatRepository
from performance_api.schemas.stat import StatCreate, StatRead
from performance_api.services.stat_service import StatService

router = APIRouter(
    prefix="/api/stats",
    tags=["Performance Stats"],
    dependencies=[Depends(policy_guard("stats"))],
)

repo = StatRepository()
service = StatService(repo, PlayerRepository())


@router.get("/{player_id}", response_model=list[StatRead])
def list_stats(
    player_id: int,
    session: Session = Depends(get_session),
):
    """Match stats for a player (empty list if none)."""
    return service.list_for_player(session, player_id)


@router.post(
    "",
    response_model=StatRead,
    status_code=status.HTTP_201_CREATED,
)
def create_stat(
    payload: StatCreate,
    session: Session = Depends(get_session),
):
    """
    Record a stat line. Requires playerId and matchDate.
    """
    return service.create_stat(session, payload)
