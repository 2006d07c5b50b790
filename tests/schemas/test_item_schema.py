"""Item Schemas — strict stat bags, legacy aliases, and partial updates.

Tests:
    - Stats keep scalar types exactly (no coercion between bool/int/float/str)
    - Nested or null stat values are rejected
    - Legacy keys (levelReq, categoryid, rarityid, isTradable) are accepted
    - ItemUpdate.changes() only carries sent fields and rejects nulls on required columns
"""

import pytest
from pydantic import ValidationError

from game_catalog.schemas.item import ItemCreate, ItemUpdate


def _create(**overrides) -> ItemCreate:
    body = {"name": "Iron Sword", "price": 100}
    body.update(overrides)
    return ItemCreate.model_validate(body)


def test_defaults_applied():
    item = _create()
    assert item.level_requirement == 1
    assert item.is_tradable is True
    assert item.stats == {}


def test_stats_keep_scalar_types():
    stats = _create(stats={
        "attack": 10, "purity": 0.8, "instant": True, "size": "medium", "code": "1",
    }).stats
    assert stats["attack"] == 10 and type(stats["attack"]) is int
    assert type(stats["purity"]) is float
    assert stats["instant"] is True
    assert stats["size"] == "medium"
    assert stats["code"] == "1"


@pytest.mark.parametrize("value", [{"nested": 1}, [1, 2], None])
def test_non_scalar_stats_rejected(value):
    with pytest.raises(ValidationError):
        _create(stats={"bad": value})


def test_negative_price_rejected():
    with pytest.raises(ValidationError):
        _create(price=-1)


def test_level_requirement_below_one_rejected():
    with pytest.raises(ValidationError):
        _create(level_requirement=0)


def test_legacy_keys_accepted():
    item = _create(levelReq=5, categoryid=2, rarityid=3, isTradable=False)
    assert item.level_requirement == 5
    assert item.category_id == 2
    assert item.rarity_id == 3
    assert item.is_tradable is False


def test_blank_name_rejected():
    with pytest.raises(ValidationError):
        _create(name="   ")


def test_update_changes_only_sent_fields():
    update = ItemUpdate.model_validate({"price": 300})
    assert update.changes() == {"price": 300}


def test_update_allows_clearing_category():
    update = ItemUpdate.model_validate({"category_id": None})
    assert update.changes() == {"category_id": None}


@pytest.mark.parametrize("field", ["name", "price", "level_requirement", "stats"])
def test_update_rejects_null_on_required_columns(field):
    with pytest.raises(ValidationError):
        ItemUpdate.model_validate({field: None})
