# performance_api/services/auth_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from performance_api.core.access import PLAYER
from performance_api.core.errors import AuthenticationError, ConflictError, ValidationError
from performance_api.core.security import (
    MAX_PASSWORD_BYTES,
    create_access_token,
    hash_password,
    verify_password,
)
from performance_api.database import storage_errors
from performance_api.models.user import User
from performance_api.repositories.user_repo import UserRepository
from performance_api.schemas.user import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

# Same body for "unknown email" and "wrong password" so callers cannot
# probe which emails are registered.
INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """
    Registration and login.

    Responsibilities:
      - validate registration input, enforce unique email
      - hash passwords, never return them
      - check credentials and issue access tokens
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    @staticmethod
    def _normalize_email(email: str) -> str:
        return email.strip().lower()

    def register(self, session: Session, payload: RegisterRequest) -> User:
        """
        Create a new identity.

        Rules:
          - name, email and password are all required
          - email must not be registered yet
          - password is stored as submitted and must fit in 72 bytes
          - role defaults to "player"

        Raises:
            ValidationError(400): missing field or over-long password.
            ConflictError(400): email already registered.
        """
        if not payload.name or not payload.email or not payload.password:
            raise ValidationError("Name, email, and password are required")
        if len(payload.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                "Password is too long",
                message=f"Password must be at most {MAX_PASSWORD_BYTES} bytes",
            )

        email = self._normalize_email(str(payload.email))

        with storage_errors(session, "register user"):
            if self.repo.get_by_email(session, email) is not None:
                raise ConflictError("Email already registered")

            user = User(
                name=payload.name,
                email=email,
                password_hash=hash_password(payload.password),
                role=payload.role or PLAYER,
            )
            try:
                user = self.repo.create(session, user)
            except IntegrityError:
                # Lost a race with a concurrent registration of the same email.
                session.rollback()
                raise ConflictError("Email already registered")

        logger.info("Registered user %s with role %s", user.id, user.role)
        return user

    def login(self, session: Session, payload: LoginRequest) -> tuple[str, User]:
        """
        Check credentials and issue a token.

        Returns:
            (token, user)

        Raises:
            ValidationError(400): email or password missing.
            AuthenticationError(401): unknown email or wrong password
            (identical error in both cases).
        """
        if not payload.email or not payload.password:
            raise ValidationError("Email and password are required")

        email = self._normalize_email(payload.email)

        with storage_errors(session, "log in"):
            user = self.repo.get_by_email(session, email)

        if user is None:
            logger.warning("Login failed: unknown email")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not verify_password(payload.password, user.password_hash):
            logger.warning("Login failed: bad password for user %s", user.id)
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = create_access_token(user.id, user.role, user.email)
        return token, user
