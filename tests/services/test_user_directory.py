"""User Directory — registration, login, and token-to-actor resolution.

Invariants:
    - New accounts get the Player role
    - Duplicate username/email conflicts name the offending field
    - Wrong password and unknown user fail with the same message
    - resolve_actor reads the role from the user row, not the token
"""

import pytest

from game_catalog.config import get_settings
from game_catalog.core.domain_types import Role
from game_catalog.core.errors import AuthenticationError, ConflictError
from game_catalog.infrastructure.security import issue_token
from game_catalog.services.user_directory import INVALID_CREDENTIALS, UserDirectory


@pytest.fixture
def directory(test_db):
    return UserDirectory(test_db, get_settings())


async def test_register_assigns_player_role(directory, roles):
    user = await directory.register("newbie", "newbie@example.com", "hunter22")
    assert user.id is not None
    assert user.role.name == "Player"
    assert user.password_hash != "hunter22"


async def test_register_duplicate_username(directory, player_user):
    with pytest.raises(ConflictError) as exc_info:
        await directory.register("player", "fresh@example.com", "hunter22")
    assert exc_info.value.field == "username"


async def test_register_duplicate_email(directory, player_user):
    with pytest.raises(ConflictError) as exc_info:
        await directory.register("fresh", "player@example.com", "hunter22")
    assert exc_info.value.field == "email"


async def test_authenticate_valid_credentials(directory, player_user, user_password):
    user = await directory.authenticate("player", user_password)
    assert user.id == player_user.id


async def test_authenticate_wrong_password(directory, player_user):
    with pytest.raises(AuthenticationError) as exc_info:
        await directory.authenticate("player", "wrong-password")
    assert exc_info.value.message == INVALID_CREDENTIALS


async def test_authenticate_unknown_user_same_message(directory, roles, user_password):
    with pytest.raises(AuthenticationError) as exc_info:
        await directory.authenticate("nobody", user_password)
    assert exc_info.value.message == INVALID_CREDENTIALS


async def test_resolve_actor_from_issued_token(directory, admin_user):
    token = directory.issue_token_for(admin_user)
    actor = await directory.resolve_actor(token)
    assert actor.id == admin_user.id
    assert actor.role is Role.ADMIN


async def test_resolve_actor_ignores_role_claim(directory, player_user):
    settings = get_settings()
    forged = issue_token(
        player_user.id, "player", Role.ADMIN, secret=settings.jwt_secret,
    )
    actor = await directory.resolve_actor(forged)
    assert actor.role is Role.PLAYER


async def test_resolve_actor_for_missing_user(directory, roles):
    settings = get_settings()
    token = issue_token(999, "ghost", Role.PLAYER, secret=settings.jwt_secret)
    with pytest.raises(AuthenticationError):
        await directory.resolve_actor(token)
