"""Domain Types — verifies identity wrappers and the Role enum.

Tests:
    - NewType wrappers are plain ints at runtime
    - Role values match the roles.name column
    - Role.from_name is exact: unknown or differently-cased names are rejected
"""

import pytest

from game_catalog.core.domain_types import (
    CategoryId, ItemId, RarityId, Role, UserId,
)


def test_identity_types_wrap_int():
    assert UserId(3) == 3
    assert ItemId(10) == 10
    assert CategoryId(1) == 1
    assert RarityId(2) == 2


def test_role_has_two_members():
    assert set(Role) == {Role.ADMIN, Role.PLAYER}


def test_role_values_match_stored_names():
    assert Role.ADMIN.value == "Admin"
    assert Role.PLAYER.value == "Player"


def test_role_compares_equal_to_its_value():
    assert Role.ADMIN == "Admin"


def test_from_name_resolves_known_roles():
    assert Role.from_name("Admin") is Role.ADMIN
    assert Role.from_name("Player") is Role.PLAYER


@pytest.mark.parametrize("name", ["admin", "Moderator", "", "ADMIN"])
def test_from_name_rejects_unknown_names(name):
    with pytest.raises(ValueError):
        Role.from_name(name)
