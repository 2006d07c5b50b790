"""Category Tree — persistence shell around the pure category arena.

Invariants:
    - Hierarchy decisions (expansion, cycle checks) are delegated to core/category_tree.py
    - A rejected re-parent leaves the stored category unmodified
    - Names are unique: DuplicateNameError before insert, and again if the unique
      constraint fires on commit (concurrent create)
    - delete detaches direct children to roots and uncategorizes items in one transaction

Design Decisions:
    - Whole-arena load per tree read: category sets are small reference data and a
      single SELECT beats recursive queries across dialects
    - Detach-on-delete done in SQL as well as via ON DELETE SET NULL: SQLite test
      databases run without foreign key enforcement
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from game_catalog.core.category_tree import (
    CategoryNode, CategoryRecord, build_forest, build_subtree, check_reparent,
)
from game_catalog.core.errors import (
    DuplicateNameError, ResourceNotFoundError, SelfParentError,
)
from game_catalog.models.category import Category
from game_catalog.models.item import Item

logger = logging.getLogger(__name__)


def _to_record(category: Category) -> CategoryRecord:
    return CategoryRecord(
        id=category.id,
        name=category.name,
        description=category.description,
        parent_id=category.parent_id,
    )


class CategoryTree:
    """Category hierarchy reads and writes."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _load_arena(self) -> list[CategoryRecord]:
        result = await self.db.execute(select(Category).order_by(Category.id))
        return [_to_record(c) for c in result.scalars().all()]

    async def _name_taken(self, name: str) -> bool:
        result = await self.db.execute(
            select(Category.id).where(Category.name == name),
        )
        return result.scalar_one_or_none() is not None

    async def _require_parent(self, parent_id: int) -> None:
        if await self.db.get(Category, parent_id) is None:
            raise ResourceNotFoundError("Category", parent_id)

    async def list_all(self, root_only: bool = False) -> list[CategoryNode]:
        """Roots with two expanded levels, or every category flat."""
        records = await self._load_arena()
        if root_only:
            return build_forest(records)
        return [
            CategoryNode(
                id=r.id, name=r.name, description=r.description,
                parent_id=r.parent_id,
            )
            for r in records
        ]

    async def get_by_id(self, category_id: int) -> CategoryNode | None:
        """Category with its subcategories expanded, or None."""
        return build_subtree(await self._load_arena(), category_id)

    async def exists(self, category_id: int) -> bool:
        return await self.db.get(Category, category_id) is not None

    async def create(
        self, name: str, description: str | None = None,
        parent_id: int | None = None,
    ) -> Category:
        if parent_id is not None:
            await self._require_parent(parent_id)
        if await self._name_taken(name):
            raise DuplicateNameError(name)

        category = Category(name=name, description=description, parent_id=parent_id)
        self.db.add(category)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateNameError(name)
        logger.info(
            f"Category '{name}' created", extra={"category_id": category.id},
        )
        return category

    async def update(self, category_id: int, changes: dict) -> Category | None:
        """Apply changes; None if the category does not exist."""
        if "parent_id" in changes and changes["parent_id"] == category_id:
            raise SelfParentError(category_id)

        category = await self.db.get(Category, category_id)
        if category is None:
            return None

        if "parent_id" in changes and changes["parent_id"] is not None:
            new_parent_id = changes["parent_id"]
            await self._require_parent(new_parent_id)
            parent_of = {r.id: r.parent_id for r in await self._load_arena()}
            check_reparent(category_id, new_parent_id, parent_of)

        new_name = changes.get("name")
        if new_name is not None and new_name != category.name:
            if await self._name_taken(new_name):
                raise DuplicateNameError(new_name)

        for key in ("name", "description", "parent_id"):
            if key in changes:
                setattr(category, key, changes[key])
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateNameError(new_name or category.name)
        return category

    async def delete(self, category_id: int) -> bool:
        """Delete; children become roots and items become uncategorized."""
        category = await self.db.get(Category, category_id)
        if category is None:
            return False

        await self.db.execute(
            update(Category)
            .where(Category.parent_id == category_id)
            .values(parent_id=None),
        )
        await self.db.execute(
            update(Item)
            .where(Item.category_id == category_id)
            .values(category_id=None),
        )
        await self.db.delete(category)
        await self.db.commit()
        logger.info(
            f"Category {category_id} deleted", extra={"category_id": category_id},
        )
        return True
