# performance_api/routers/players.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from performance_api.core.auth import policy_guard
from performance_api.database import get_session
from performance_api.repositories.player_repo import PlayerRepository
from performance_api.repositories.user_repo import UserRepository
from performance_api.schemas.player import PlayerCreate, PlayerRead, PlayerUpdate
from performance_api.schemas.user import MessageResponse
from performance_api.services.player_service import PlayerService

# Every route needs a token; PUT additionally needs role=coach (ACCESS_POLICY).
router = APIRouter(
    prefix="/api/players",
    tags=["Players"],
    dependencies=[Depends(policy_guard("players"))],
)

repo = PlayerRepository()
service = PlayerService(repo, UserRepository())


@router.get("", response_model=list[PlayerRead])
def list_players(session: Session = Depends(get_session)):
    """List all player profiles."""
    return service.list_players(session)


@router.get("/{player_id}", response_model=PlayerRead)
def get_player(
    player_id: int,
    session: Session = Depends(get_session),
):
    return service.get_player(session, player_id)


@router.post(
    "",
    response_model=PlayerRead,
    status_code=status.HTTP_201_CREATED,
)
def create_player(
    payload: PlayerCreate,
    session: Session = Depends(get_session),
):
    """
    Create a player profile.

    Any authenticated identity may create one; `name` is required.
    """
    return service.create_player(session, payload)


@router.put("/{player_id}", response_model=PlayerRead)
def update_player(
    player_id: int,
    payload: PlayerUpdate,
    session: Session = Depends(get_session),
):
    """
    Update a player (coach only). Fields left out of the body are unchanged.
    """
    return service.update_player(session, player_id, payload)


@router.delete("/{player_id}", response_model=MessageResponse)
def delete_player(
    player_id: int,
    session: Session = Depends(get_session),
):
    """
    Delete a player together with its stats, sessions and evaluations.
    """
    service.delete_player(session, player_id)
    return {"message": "Player deleted successfully"}
