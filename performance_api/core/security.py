# performance_api/core/security.py
"""
Credential and token primitives.

Provides:
- Password hashing (bcrypt, salted, one-way)
- Access token issue / verification (HS256 JWT via python-jose)

Tokens are stateless: nothing is stored server-side, validity is decided by
signature + expiry only. The embedded role is trusted only after the
signature check passes.
"""
import logging
import uuid
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel

from performance_api.core.config import get_settings
from performance_api.core.errors import AuthenticationError

settings = get_settings()
logger = logging.getLogger(__name__)

# Client-visible text for every token failure (missing, expired, malformed).
TOKEN_ERROR = "Authentication required"
TOKEN_ERROR_MESSAGE = "A valid bearer token is required to access this resource"

# bcrypt only accepts the first 72 bytes of a secret; longer ones are refused.
MAX_PASSWORD_BYTES = 72


class TokenClaims(BaseModel):
    """Decoded, verified token payload."""

    id: int
    role: str
    email: str


def hash_password(raw_password: str) -> str:
    """Hash a password with a fresh salt."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(raw_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(raw_password: str, hashed_password: str) -> bool:
    """Check a password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(
            raw_password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


def create_access_token(
    user_id: int,
    role: str,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Issue a signed access token.

    Claims:
      - sub: identity id (string, per JWT convention)
      - role, email
      - iat / exp: issue time and expiry (default JWT_EXPIRES_HOURS)
      - jti: unique token id
    """
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.JWT_EXPIRES_HOURS)

    payload = {
        "sub": str(user_id),
        "role": role,
        "email": email,
        "iat": now,
        "exp": now + expires_delta,
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def _reject(reason: str) -> AuthenticationError:
    logger.warning("Token rejected: %s", reason)
    return AuthenticationError(TOKEN_ERROR, message=TOKEN_ERROR_MESSAGE)


def verify_token(token: str | None) -> TokenClaims:
    """
    Verify signature and expiry of an access token and return its claims.

    Raises:
        AuthenticationError(401): token missing, expired, malformed, or
        lacking the sub/role/email claims. The client always receives the
        same body; only the log line tells the cases apart.
    """
    if not token:
        raise _reject("missing token")

    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except ExpiredSignatureError:
        raise _reject("expired signature")
    except JWTError as exc:
        raise _reject(f"malformed or invalid signature ({exc})")

    sub = payload.get("sub")
    role = payload.get("role")
    email = payload.get("email")
    if not sub or not role or not email:
        raise _reject("missing sub/role/email claims")

    try:
        user_id = int(sub)
    except (TypeError, ValueError):
        raise _reject("non-numeric sub claim")

    return TokenClaims(id=user_id, role=role, email=email)
