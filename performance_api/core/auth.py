# performance_api/core/auth.py
import logging

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from performance_api.core.access import authorize, required_role
from performance_api.core.security import TokenClaims, verify_token

logger = logging.getLogger(__name__)

# HTTP Bearer scheme:
# - auto_error=False => a missing Authorization header does NOT raise the
#   framework's own 403; verify_token reports it as our 401 instead.
bearer_scheme = HTTPBearer(auto_error=False)


def require_auth(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenClaims:
    """
    Enforce authentication.

    Flow:
      1. Read `Authorization: Bearer <token>`.
      2. Verify signature + expiry.
      3. Return the decoded claims {id, role, email}.

    Raises:
        AuthenticationError(401): if the token is missing, expired or malformed.
    """
    token = credentials.credentials if credentials else None
    return verify_token(token)


def policy_guard(route_class: str):
    """
    Build a dependency that applies ACCESS_POLICY for `route_class`.

    Attach it at router level so the check runs before any handler
    logic (and before storage is touched):

        router = APIRouter(
            prefix="/players",
            dependencies=[Depends(policy_guard("players"))],
        )
    """

    def guard(
        request: Request,
        claims: TokenClaims = Depends(require_auth),
    ) -> TokenClaims:
        role = required_role(request.method, route_class)
        if role is not None and claims.role != role:
            logger.warning(
                "Denied %s %s for user %s (role=%s, required=%s)",
                request.method,
                request.url.path,
                claims.id,
                claims.role,
                role,
            )
        return authorize(claims, role)

    return guard
