"""Access Policy — owner-or-admin decisions over plain Actor values.

Tests:
    - Player may act on their own resources only
    - Admin may act on any subject
    - Denials raise ForbiddenError with a generic message and no resource context
"""

import pytest

from game_catalog.core.access_policy import (
    Actor, can_access, ensure_admin, ensure_can_access,
)
from game_catalog.core.domain_types import Role, UserId
from game_catalog.core.errors import ForbiddenError


def _player(user_id: int = 2) -> Actor:
    return Actor(id=UserId(user_id), username="player", role=Role.PLAYER)


def _admin(user_id: int = 1) -> Actor:
    return Actor(id=UserId(user_id), username="admin", role=Role.ADMIN)


def test_player_can_access_own_resources():
    assert can_access(_player(2), 2) is True


def test_player_cannot_access_other_users_resources():
    assert can_access(_player(2), 3) is False


def test_admin_can_access_any_subject():
    admin = _admin(1)
    assert can_access(admin, 1)
    assert can_access(admin, 3)
    assert can_access(admin, 999)


def test_ensure_can_access_raises_forbidden_for_other_subject():
    with pytest.raises(ForbiddenError) as exc_info:
        ensure_can_access(_player(2), 3)
    assert exc_info.value.http_status == 403


def test_ensure_can_access_allows_owner():
    ensure_can_access(_player(2), 2)


def test_forbidden_response_is_generic():
    with pytest.raises(ForbiddenError) as exc_info:
        ensure_can_access(_player(2), 3)
    body = exc_info.value.to_response()["error"]
    assert body["code"] == "FORBIDDEN"
    assert "3" not in body["message"]
    assert "context" not in body


def test_ensure_admin_rejects_player():
    with pytest.raises(ForbiddenError):
        ensure_admin(_player())


def test_ensure_admin_accepts_admin():
    ensure_admin(_admin())


def test_actor_is_immutable():
    actor = _player()
    with pytest.raises(AttributeError):
        actor.role = Role.ADMIN
