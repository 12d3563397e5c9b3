# performance_api/core/errors.py
from fastapi import HTTPException, status


class APIError(HTTPException):
    """
    Base class for the application's error taxonomy.

    Every subclass pins its HTTP status; instances carry:
      - detail: short client-visible error (rendered as "error")
      - message: optional longer explanation (rendered as "message")

    Services raise these directly; the exception handler in main.py turns
    them into `{"error": ..., "message": ...}` bodies.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str, message: str | None = None):
        super().__init__(status_code=type(self).status_code, detail=detail)
        self.message = message


class ValidationError(APIError):
    """Malformed or missing input (400)."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(APIError):
    """Missing/invalid/expired token or bad credentials (401)."""

    status_code = status.HTTP_401_UNAUTHORIZED


class AuthorizationError(APIError):
    """Authenticated, but the role does not permit the operation (403)."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(APIError):
    """Duplicate value on a unique field. Reported as a bad request."""

    status_code = status.HTTP_400_BAD_REQUEST


class InternalError(APIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
