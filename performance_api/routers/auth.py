# performance_api/routers/auth.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from performance_api.database import get_session
from performance_api.repositories.user_repo import UserRepository
from performance_api.schemas.user import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    UserRead,
    UserSummary,
)
from performance_api.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])

# Logout lives under /api with the resource routes.
logout_router = APIRouter(prefix="/api", tags=["Auth"])

repo = UserRepository()
service = AuthService(repo)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: RegisterRequest,
    session: Session = Depends(get_session),
):
    """
    Register a new identity.

    - role defaults to "player"; it cannot be changed later.
    - The response never contains the password hash.
    """
    user = service.register(session, payload)
    return RegisterResponse(
        message="User registered successfully",
        user=UserSummary.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    session: Session = Depends(get_session),
):
    """
    Exchange email + password for a bearer token (valid 24h by default).
    """
    token, user = service.login(session, payload)
    return LoginResponse(
        message="Login successful",
        token=token,
        user=UserRead.model_validate(user),
    )


@logout_router.post("/logout", response_model=MessageResponse)
def logout():
    """
    Stateless logout.

    Tokens are not tracked server-side, so nothing is revoked here; the
    client is expected to discard its token.
    """
    return {"message": "Logout successful. Please discard your token on the client."}
