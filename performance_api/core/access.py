# performance_api/core/access.py
"""
Role-based access policy.

Roles are compared by plain equality; there is no hierarchy, a coach does
not implicitly hold "player" rights or vice versa. The policy is a static
table keyed by (HTTP method, route class). Anything not listed only needs
an authenticated identity.
"""
from performance_api.core.errors import AuthorizationError
from performance_api.core.security import TokenClaims

COACH = "coach"
PLAYER = "player"

ACCESS_POLICY: dict[tuple[str, str], str] = {
    ("PUT", "players"): COACH,
    ("POST", "training-sessions"): COACH,
    ("POST", "evaluations"): COACH,
}


def required_role(method: str, route_class: str) -> str | None:
    """Role required for `method` on `route_class`, or None if any identity may pass."""
    return ACCESS_POLICY.get((method.upper(), route_class))


def authorize(claims: TokenClaims, role: str | None = None) -> TokenClaims:
    """
    Allow or deny a verified identity.

    - role is None  => authentication-only gate, always allowed.
    - otherwise     => claims.role must equal role exactly.

    Raises:
        AuthorizationError(403): on role mismatch.
    """
    if role is not None and claims.role != role:
        raise AuthorizationError(
            "Access denied",
            message=f"This action requires the '{role}' role",
        )
    return claims
