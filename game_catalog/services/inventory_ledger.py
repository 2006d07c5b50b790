"""Inventory Ledger — per-user item quantities with merge/replace/delete transitions.

Invariants:
    - Every mutation verifies the item exists first (ItemNotFoundError)
    - add_item merges by addition through one atomic upsert-increment statement,
      so concurrent adds on the same (user, item) never lose an update
    - set_quantity reads the entry under a row lock; absent → InventoryEntryNotFoundError
      (never creates), quantity <= 0 deletes, quantity > 0 replaces
    - remove_item is idempotent and reports whether a row was deleted
    - No access checks here: the orchestrator gates every call

Design Decisions:
    - Dialect-native INSERT ... ON CONFLICT DO UPDATE for PostgreSQL and SQLite;
      other dialects use UPDATE quantity = quantity + n, falling back to INSERT
    - Entries returned after a write are reloaded with populate_existing so
      the quantity reflects the database, not a stale identity-map copy
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from game_catalog.core.errors import (
    ConflictError, InventoryEntryNotFoundError, ItemNotFoundError,
)
from game_catalog.core.inventory_transitions import (
    QuantityAction, plan_quantity_update, validate_add_quantity,
)
from game_catalog.core.pagination import PageRequest
from game_catalog.models.inventory_entry import InventoryEntry
from game_catalog.models.item import Item

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class InventoryLedger:
    """Quantity bookkeeping for (user, item) pairs."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _require_item(self, item_id: int) -> None:
        found = await self.db.scalar(select(Item.id).where(Item.id == item_id))
        if found is None:
            raise ItemNotFoundError(item_id)

    async def find_entry(
        self, user_id: int, item_id: int, for_update: bool = False,
    ) -> InventoryEntry | None:
        query = (
            select(InventoryEntry)
            .where(InventoryEntry.user_id == user_id)
            .where(InventoryEntry.item_id == item_id)
            .execution_options(populate_existing=True)
        )
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_for_user(
        self, user_id: int, page: PageRequest,
    ) -> tuple[list[InventoryEntry], int]:
        """One page of the user's entries plus their total entry count."""
        result = await self.db.execute(
            select(InventoryEntry)
            .where(InventoryEntry.user_id == user_id)
            .order_by(InventoryEntry.id)
            .limit(page.limit)
            .offset(page.offset),
        )
        entries = list(result.scalars().all())
        total = await self.db.scalar(
            select(func.count(InventoryEntry.id))
            .where(InventoryEntry.user_id == user_id),
        )
        return entries, total or 0

    async def add_item(
        self, user_id: int, item_id: int, quantity: int = 1,
    ) -> InventoryEntry:
        """Create the entry or add `quantity` to the stored one."""
        validate_add_quantity(quantity)
        await self._require_item(item_id)

        dialect = self.db.get_bind().dialect.name
        insert_fn = _UPSERT_INSERTS.get(dialect)
        if insert_fn is not None:
            await self._upsert_increment(insert_fn, user_id, item_id, quantity)
        else:
            await self._update_or_insert(user_id, item_id, quantity)

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(
                "Inventory entry changed concurrently, retry the request", "item_id",
            )

        entry = await self.find_entry(user_id, item_id)
        logger.info(
            f"Added {quantity} of item {item_id} to user {user_id}",
            extra={"user_id": user_id, "item_id": item_id, "quantity": entry.quantity},
        )
        return entry

    async def _upsert_increment(
        self, insert_fn, user_id: int, item_id: int, quantity: int,
    ) -> None:
        table = InventoryEntry.__table__
        stmt = insert_fn(table).values(
            userid=user_id,
            itemid=item_id,
            quantity=quantity,
            created_at=datetime.now(timezone.utc),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["userid", "itemid"],
            set_={"quantity": table.c.quantity + stmt.excluded.quantity},
        )
        await self.db.execute(stmt)

    async def _update_or_insert(
        self, user_id: int, item_id: int, quantity: int,
    ) -> None:
        table = InventoryEntry.__table__
        result = await self.db.execute(
            update(table)
            .where(table.c.userid == user_id)
            .where(table.c.itemid == item_id)
            .values(quantity=table.c.quantity + quantity),
        )
        if result.rowcount == 0:
            self.db.add(InventoryEntry(
                user_id=user_id, item_id=item_id, quantity=quantity,
            ))

    async def set_quantity(
        self, user_id: int, item_id: int, quantity: int,
    ) -> InventoryEntry | None:
        """Replace the stored quantity; None when quantity <= 0 removed the entry."""
        await self._require_item(item_id)
        action = plan_quantity_update(quantity)

        entry = await self.find_entry(user_id, item_id, for_update=True)
        if entry is None:
            raise InventoryEntryNotFoundError(user_id, item_id)

        if action is QuantityAction.REMOVE:
            await self.db.delete(entry)
            await self.db.commit()
            logger.info(
                f"Removed item {item_id} from user {user_id} (quantity {quantity})",
                extra={"user_id": user_id, "item_id": item_id},
            )
            return None

        entry.quantity = quantity
        await self.db.commit()
        return entry

    async def remove_item(self, user_id: int, item_id: int) -> bool:
        """Delete the entry if present; False when there was none."""
        result = await self.db.execute(
            delete(InventoryEntry)
            .where(InventoryEntry.user_id == user_id)
            .where(InventoryEntry.item_id == item_id),
        )
        await self.db.commit()
        removed = result.rowcount > 0
        if removed:
            logger.info(
                f"Removed item {item_id} from user {user_id}",
                extra={"user_id": user_id, "item_id": item_id},
            )
        return removed
