"""Category Schemas — name trimming, parent aliases, and partial updates.

Tests:
    - Names are trimmed and must be 1-50 characters
    - parentid is accepted as an alias of parent_id
    - CategoryUpdate distinguishes "parent_id omitted" from "parent_id: null"
"""

import pytest
from pydantic import ValidationError

from game_catalog.schemas.category import CategoryCreate, CategoryUpdate


def test_name_is_trimmed():
    assert CategoryCreate(name="  Swords ").name == "Swords"


def test_long_name_rejected():
    with pytest.raises(ValidationError):
        CategoryCreate(name="x" * 51)


def test_parentid_alias_accepted():
    assert CategoryCreate.model_validate({"name": "Swords", "parentid": 1}).parent_id == 1


def test_update_without_parent_leaves_it_out():
    assert CategoryUpdate.model_validate({"name": "Blades"}).changes() == {"name": "Blades"}


def test_update_with_null_parent_promotes_to_root():
    changes = CategoryUpdate.model_validate({"parent_id": None}).changes()
    assert changes == {"parent_id": None}


def test_update_rejects_null_name():
    with pytest.raises(ValidationError):
        CategoryUpdate.model_validate({"name": None})
