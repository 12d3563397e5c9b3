# performance_api/services/player_service.py
from datetime import datetime, timezone

from sqlmodel import Session

from performance_api.core.errors import NotFoundError, ValidationError
from performance_api.database import storage_errors
from performance_api.models.player import Player
from performance_api.repositories.player_repo import PlayerRepository
from performance_api.repositories.user_repo import UserRepository
from performance_api.schemas.player import PlayerCreate, PlayerUpdate


class PlayerService:
    """
    Business logic for Player.

    Responsibilities:
      - required-field and reference checks before any write
      - 404 on unknown ids for get/update/delete
      - partial update followed by a re-fetch
      - cascade delete of stats, sessions and evaluations
    """

    def __init__(self, repo: PlayerRepository, user_repo: UserRepository):
        self.repo = repo
        self.user_repo = user_repo

    def _check_user_link(self, session: Session, user_id: int | None) -> None:
        if user_id is None:
            return
        if self.user_repo.get_by_id(session, user_id) is None:
            raise ValidationError("userId does not reference an existing user")

    def list_players(self, session: Session) -> list[Player]:
        with storage_errors(session, "fetch players"):
            return self.repo.list(session)

    def get_player(self, session: Session, player_id: int) -> Player:
        """
        Raises:
            NotFoundError(404): if no player has this id.
        """
        with storage_errors(session, "fetch player"):
            player = self.repo.get_by_id(session, player_id)
        if not player:
            raise NotFoundError("Player not found")
        return player

    def create_player(self, session: Session, payload: PlayerCreate) -> Player:
        if not payload.name:
            raise ValidationError("Name is required")

        with storage_errors(session, "create player"):
            self._check_user_link(session, payload.user_id)
            player = Player(
                name=payload.name,
                age=payload.age,
                position=payload.position,
                team=payload.team,
                user_id=payload.user_id,
            )
            return self.repo.create(session, player)

    def update_player(
        self,
        session: Session,
        player_id: int,
        payload: PlayerUpdate,
    ) -> Player:
        """
        Partial update: only fields present in the body are written.

        Raises:
            ValidationError(400): explicit null name or dangling userId.
            NotFoundError(404): unknown player id.
        """
        changes = payload.model_dump(exclude_unset=True)
        if "name" in changes and changes["name"] is None:
            raise ValidationError("Name cannot be empty")

        player = self.get_player(session, player_id)

        with storage_errors(session, "update player"):
            if "user_id" in changes:
                self._check_user_link(session, changes["user_id"])

            for field, value in changes.items():
                setattr(player, field, value)
            player.updated_at = datetime.now(timezone.utc)
            self.repo.update(session, player)

        return self.get_player(session, player_id)

    def delete_player(self, session: Session, player_id: int) -> None:
        player = self.get_player(session, player_id)
        with storage_errors(session, "delete player"):
            self.repo.delete(session, player)
