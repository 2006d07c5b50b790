"""Item Catalog — item storage, filter composition, and search.

Invariants:
    - list_items applies the ItemFilter as a conjunction; totals count the full filtered set
    - search rejects blank queries before touching the database
    - search totals come from a COUNT over every match, not from the page length
    - Referenced category/rarity must exist on create/update
    - Results are ordered by id so pages are stable

Design Decisions:
    - Filter-to-SQL translation lives here, pattern building in core/item_filters.py
    - get_by_id uses populate_existing: the category/rarity of an identity-mapped
      item are refreshed after an update changed their foreign keys
"""

import logging

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from game_catalog.core.errors import ResourceNotFoundError
from game_catalog.core.item_filters import (
    LIKE_ESCAPE_CHAR, ItemFilter, contains_pattern, normalize_search_query,
)
from game_catalog.core.pagination import PageRequest
from game_catalog.models.category import Category
from game_catalog.models.inventory_entry import InventoryEntry
from game_catalog.models.item import Item
from game_catalog.models.rarity import Rarity

logger = logging.getLogger(__name__)

_WRITABLE_FIELDS = (
    "name", "description", "image_url", "price", "level_requirement",
    "category_id", "rarity_id", "stats", "is_tradable",
)


def filter_clauses(item_filter: ItemFilter) -> list:
    """SQL predicates for every set field of the filter."""
    clauses = []
    if item_filter.category_id is not None:
        clauses.append(Item.category_id == item_filter.category_id)
    if item_filter.rarity_id is not None:
        clauses.append(Item.rarity_id == item_filter.rarity_id)
    if item_filter.min_level is not None:
        clauses.append(Item.level_requirement >= item_filter.min_level)
    if item_filter.name:
        clauses.append(Item.name.ilike(
            contains_pattern(item_filter.name), escape=LIKE_ESCAPE_CHAR,
        ))
    return clauses


class ItemCatalog:
    """Catalog item reads and admin writes."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _page(
        self, clauses: list, page: PageRequest,
    ) -> tuple[list[Item], int]:
        result = await self.db.execute(
            select(Item)
            .where(*clauses)
            .order_by(Item.id)
            .limit(page.limit)
            .offset(page.offset),
        )
        items = list(result.scalars().all())
        total = await self.db.scalar(
            select(func.count(Item.id)).where(*clauses),
        )
        return items, total or 0

    async def list_items(
        self, item_filter: ItemFilter, page: PageRequest,
    ) -> tuple[list[Item], int]:
        """One page of filtered items plus the full filtered count."""
        return await self._page(filter_clauses(item_filter), page)

    async def search(self, query: str, page: PageRequest) -> tuple[list[Item], int]:
        """Items whose name or description contains the query (case-insensitive)."""
        term = normalize_search_query(query)
        pattern = contains_pattern(term)
        match = or_(
            Item.name.ilike(pattern, escape=LIKE_ESCAPE_CHAR),
            Item.description.ilike(pattern, escape=LIKE_ESCAPE_CHAR),
        )
        return await self._page([match], page)

    async def get_by_id(self, item_id: int) -> Item | None:
        result = await self.db.execute(
            select(Item)
            .where(Item.id == item_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def _check_references(self, fields: dict) -> None:
        category_id = fields.get("category_id")
        if category_id is not None and await self.db.get(Category, category_id) is None:
            raise ResourceNotFoundError("Category", category_id)
        rarity_id = fields.get("rarity_id")
        if rarity_id is not None and await self.db.get(Rarity, rarity_id) is None:
            raise ResourceNotFoundError("Rarity", rarity_id)

    async def create(self, fields: dict) -> Item:
        await self._check_references(fields)
        item = Item(**{k: v for k, v in fields.items() if k in _WRITABLE_FIELDS})
        self.db.add(item)
        await self.db.commit()
        logger.info(f"Item '{item.name}' created", extra={"item_id": item.id})
        return await self.get_by_id(item.id)

    async def update(self, item_id: int, changes: dict) -> Item | None:
        """Apply changes; None if the item does not exist."""
        item = await self.db.get(Item, item_id)
        if item is None:
            return None
        await self._check_references(changes)
        for key, value in changes.items():
            if key in _WRITABLE_FIELDS:
                setattr(item, key, value)
        await self.db.commit()
        return await self.get_by_id(item_id)

    async def delete(self, item_id: int) -> bool:
        """Delete the item and every inventory entry holding it."""
        item = await self.db.get(Item, item_id)
        if item is None:
            return False
        await self.db.execute(
            delete(InventoryEntry).where(InventoryEntry.item_id == item_id),
        )
        await self.db.delete(item)
        await self.db.commit()
        logger.info(f"Item {item_id} deleted", extra={"item_id": item_id})
        return True

    async def list_rarities(self) -> list[Rarity]:
        result = await self.db.execute(select(Rarity).order_by(Rarity.id))
        return list(result.scalars().all())
