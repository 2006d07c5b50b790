"""Category Tree Service — hierarchy reads and writes against a real session.

Invariants:
    - A self-parent update fails and leaves the category unmodified
    - A re-parent under a descendant fails with CategoryCycleError
    - Deleting a parent promotes its children to roots and uncategorizes its items
    - Duplicate names fail with DuplicateNameError
"""

import pytest
from sqlalchemy import select

from game_catalog.core.errors import (
    CategoryCycleError, DuplicateNameError, ResourceNotFoundError, SelfParentError,
)
from game_catalog.models.item import Item
from game_catalog.services.category_tree import CategoryTree


# ─── Reads ───────────────────────────────────────────────────────

async def test_root_listing_expands_two_levels(test_db, categories):
    forest = await CategoryTree(test_db).list_all(root_only=True)
    assert [n.name for n in forest] == ["Weapons", "Armor"]
    swords = forest[0].subcategories[0]
    assert swords.name == "Swords"
    assert [n.name for n in swords.subcategories] == ["Longswords"]
    assert swords.subcategories[0].subcategories is None


async def test_flat_listing_returns_every_category(test_db, categories):
    nodes = await CategoryTree(test_db).list_all()
    assert len(nodes) == 4
    assert all(n.subcategories is None for n in nodes)


async def test_get_by_id_expands_subcategories(test_db, categories):
    node = await CategoryTree(test_db).get_by_id(categories["Weapons"].id)
    assert node.subcategories[0].name == "Swords"


async def test_get_by_id_absent_is_none(test_db, categories):
    assert await CategoryTree(test_db).get_by_id(999) is None


# ─── Create ──────────────────────────────────────────────────────

async def test_create_child_appears_under_parent(test_db):
    tree = CategoryTree(test_db)
    weapons = await tree.create("Weapons")
    await tree.create("Swords", "Melee weapons", weapons.id)

    forest = await tree.list_all(root_only=True)
    assert forest[0].name == "Weapons"
    assert [c.name for c in forest[0].subcategories] == ["Swords"]


async def test_create_duplicate_name_rejected(test_db, categories):
    with pytest.raises(DuplicateNameError):
        await CategoryTree(test_db).create("Weapons")


async def test_create_with_missing_parent_rejected(test_db):
    with pytest.raises(ResourceNotFoundError):
        await CategoryTree(test_db).create("Orphan", parent_id=42)


# ─── Update ──────────────────────────────────────────────────────

async def test_self_parent_rejected_and_category_unchanged(test_db, categories):
    tree = CategoryTree(test_db)
    for category in categories.values():
        before = await tree.get_by_id(category.id)
        with pytest.raises(SelfParentError):
            await tree.update(category.id, {"parent_id": category.id})
        after = await tree.get_by_id(category.id)
        assert after.parent_id == before.parent_id
        assert after.name == before.name


async def test_reparent_under_grandchild_rejected(test_db, categories):
    tree = CategoryTree(test_db)
    with pytest.raises(CategoryCycleError):
        await tree.update(
            categories["Weapons"].id, {"parent_id": categories["Longswords"].id},
        )
    node = await tree.get_by_id(categories["Weapons"].id)
    assert node.parent_id is None


async def test_reparent_to_other_branch(test_db, categories):
    tree = CategoryTree(test_db)
    moved = await tree.update(
        categories["Swords"].id, {"parent_id": categories["Armor"].id},
    )
    assert moved.parent_id == categories["Armor"].id


async def test_promote_to_root(test_db, categories):
    tree = CategoryTree(test_db)
    moved = await tree.update(categories["Swords"].id, {"parent_id": None})
    assert moved.parent_id is None
    roots = await tree.list_all(root_only=True)
    assert "Swords" in [n.name for n in roots]


async def test_rename_to_existing_name_rejected(test_db, categories):
    with pytest.raises(DuplicateNameError):
        await CategoryTree(test_db).update(categories["Armor"].id, {"name": "Weapons"})


async def test_update_absent_category_returns_none(test_db, categories):
    assert await CategoryTree(test_db).update(999, {"name": "Ghost"}) is None


# ─── Delete ──────────────────────────────────────────────────────

async def test_delete_promotes_children_to_roots(test_db, categories):
    tree = CategoryTree(test_db)
    assert await tree.delete(categories["Weapons"].id) is True

    roots = await tree.list_all(root_only=True)
    assert sorted(n.name for n in roots) == ["Armor", "Swords"]


async def test_delete_uncategorizes_items(test_db, items, categories):
    await CategoryTree(test_db).delete(categories["Swords"].id)

    result = await test_db.execute(
        select(Item).where(Item.name == "Iron Sword")
        .execution_options(populate_existing=True),
    )
    assert result.scalar_one().category_id is None


async def test_delete_absent_category_returns_false(test_db):
    assert await CategoryTree(test_db).delete(999) is False
