"""Auth Routes — registration, login, and the caller's profile.

Invariants:
    - register and login both answer with the public profile plus a fresh token
    - Credentials failures are 401 with one message for unknown user and bad password
"""

import logging

from fastapi import APIRouter, Depends, status

from game_catalog.api.dependencies import get_current_actor, get_user_directory
from game_catalog.core.access_policy import Actor
from game_catalog.core.errors import AuthenticationError
from game_catalog.schemas.auth import (
    AuthResponse, LoginRequest, RegisterRequest, UserRead,
)
from game_catalog.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post(
    "/register", response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    users: UserDirectory = Depends(get_user_directory),
):
    """Create a Player account."""
    user = await users.register(body.username, body.email, body.password)
    return AuthResponse(
        message="User registered successfully",
        user=UserRead.from_user(user),
        token=users.issue_token_for(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    users: UserDirectory = Depends(get_user_directory),
):
    user = await users.authenticate(body.username, body.password)
    logger.info(f"User '{user.username}' logged in", extra={"user_id": user.id})
    return AuthResponse(
        message="Login successful",
        user=UserRead.from_user(user),
        token=users.issue_token_for(user),
    )


@router.get("/me", response_model=UserRead)
async def me(
    actor: Actor = Depends(get_current_actor),
    users: UserDirectory = Depends(get_user_directory),
):
    user = await users.get(actor.id)
    if user is None:
        raise AuthenticationError("Invalid authentication token")
    return UserRead.from_user(user)
