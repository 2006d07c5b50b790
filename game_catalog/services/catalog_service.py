"""Catalog Service — boundary-facing operations composed from the catalog components.

Invariants:
    - Every user-scoped inventory call runs ensure_can_access() first, exactly once;
      the ledger itself never re-checks
    - After the access check, inventory calls on another user require that user to exist
    - Absent resources surface as typed NotFound errors; component errors pass through unchanged
    - Paginated results use one envelope: {items, meta{totalItems, itemsPerPage,
      totalPages, currentPage}} with a 1-indexed currentPage

Design Decisions:
    - Admin-only catalog mutations are enforced by the API dependency (require_admin),
      not re-checked here
    - ORM rows converted to schemas here so every route returns the same shapes
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from game_catalog.core.access_policy import Actor, ensure_can_access
from game_catalog.core.errors import (
    ForbiddenError, InventoryEntryNotFoundError, ItemNotFoundError,
    ResourceNotFoundError,
)
from game_catalog.core.item_filters import ItemFilter
from game_catalog.core.pagination import PageRequest, build_page
from game_catalog.models.user import User
from game_catalog.schemas.category import CategoryCreate, CategoryNodeRead, CategoryRead
from game_catalog.schemas.inventory import (
    InventoryEntryRead, InventoryQuantityResult,
)
from game_catalog.schemas.item import ItemCreate, ItemRead, RarityRead
from game_catalog.services.category_tree import CategoryTree
from game_catalog.services.inventory_ledger import InventoryLedger
from game_catalog.services.item_catalog import ItemCatalog

logger = logging.getLogger(__name__)


class CatalogService:
    """Orchestrates CategoryTree, ItemCatalog and InventoryLedger."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.categories = CategoryTree(db)
        self.items = ItemCatalog(db)
        self.inventory = InventoryLedger(db)

    # ─── Categories ──────────────────────────────────────────────

    async def list_categories(self, root_only: bool = False) -> list[CategoryNodeRead]:
        nodes = await self.categories.list_all(root_only)
        return [CategoryNodeRead.model_validate(n.to_dict()) for n in nodes]

    async def get_category(self, category_id: int) -> CategoryNodeRead:
        node = await self.categories.get_by_id(category_id)
        if node is None:
            raise ResourceNotFoundError("Category", category_id)
        return CategoryNodeRead.model_validate(node.to_dict())

    async def create_category(self, body: CategoryCreate) -> CategoryRead:
        category = await self.categories.create(
            body.name, body.description, body.parent_id,
        )
        return CategoryRead.model_validate(category)

    async def update_category(self, category_id: int, changes: dict) -> CategoryRead:
        category = await self.categories.update(category_id, changes)
        if category is None:
            raise ResourceNotFoundError("Category", category_id)
        return CategoryRead.model_validate(category)

    async def delete_category(self, category_id: int) -> None:
        if not await self.categories.delete(category_id):
            raise ResourceNotFoundError("Category", category_id)

    async def list_category_items(self, category_id: int, page: PageRequest) -> dict:
        if not await self.categories.exists(category_id):
            raise ResourceNotFoundError("Category", category_id)
        return await self.list_items(ItemFilter(category_id=category_id), page)

    # ─── Items ───────────────────────────────────────────────────

    async def list_items(self, item_filter: ItemFilter, page: PageRequest) -> dict:
        items, total = await self.items.list_items(item_filter, page)
        return build_page(
            [ItemRead.model_validate(i) for i in items], total, page,
        )

    async def search_items(self, query: str, page: PageRequest) -> dict:
        items, total = await self.items.search(query, page)
        return build_page(
            [ItemRead.model_validate(i) for i in items], total, page,
        )

    async def get_item(self, item_id: int) -> ItemRead:
        item = await self.items.get_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return ItemRead.model_validate(item)

    async def create_item(self, body: ItemCreate) -> ItemRead:
        item = await self.items.create(body.model_dump())
        return ItemRead.model_validate(item)

    async def update_item(self, item_id: int, changes: dict) -> ItemRead:
        item = await self.items.update(item_id, changes)
        if item is None:
            raise ItemNotFoundError(item_id)
        return ItemRead.model_validate(item)

    async def delete_item(self, item_id: int) -> None:
        if not await self.items.delete(item_id):
            raise ItemNotFoundError(item_id)

    async def list_rarities(self) -> list[RarityRead]:
        return [RarityRead.model_validate(r) for r in await self.items.list_rarities()]

    # ─── Inventory (user-scoped) ─────────────────────────────────

    async def _authorize(self, actor: Actor, subject_user_id: int) -> None:
        try:
            ensure_can_access(actor, subject_user_id)
        except ForbiddenError:
            logger.warning(
                f"Inventory access denied for actor {actor.id}",
                extra={"actor_id": actor.id, "user_id": subject_user_id},
            )
            raise
        if subject_user_id != actor.id:
            if await self.db.get(User, subject_user_id) is None:
                raise ResourceNotFoundError("User", subject_user_id)

    async def get_inventory(
        self, actor: Actor, subject_user_id: int, page: PageRequest,
    ) -> dict:
        await self._authorize(actor, subject_user_id)
        entries, total = await self.inventory.get_for_user(subject_user_id, page)
        return build_page(
            [InventoryEntryRead.model_validate(e) for e in entries], total, page,
        )

    async def add_inventory_item(
        self, actor: Actor, subject_user_id: int, item_id: int, quantity: int = 1,
    ) -> InventoryEntryRead:
        await self._authorize(actor, subject_user_id)
        entry = await self.inventory.add_item(subject_user_id, item_id, quantity)
        return InventoryEntryRead.model_validate(entry)

    async def set_inventory_quantity(
        self, actor: Actor, subject_user_id: int, item_id: int, quantity: int,
    ) -> InventoryQuantityResult:
        await self._authorize(actor, subject_user_id)
        entry = await self.inventory.set_quantity(subject_user_id, item_id, quantity)
        if entry is None:
            return InventoryQuantityResult(
                user_id=subject_user_id, item_id=item_id, quantity=0, removed=True,
            )
        return InventoryQuantityResult(
            user_id=subject_user_id, item_id=item_id, quantity=entry.quantity,
        )

    async def remove_inventory_item(
        self, actor: Actor, subject_user_id: int, item_id: int,
    ) -> None:
        await self._authorize(actor, subject_user_id)
        if not await self.inventory.remove_item(subject_user_id, item_id):
            raise InventoryEntryNotFoundError(subject_user_id, item_id)
