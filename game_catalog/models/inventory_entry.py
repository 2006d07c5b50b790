"""InventoryEntry ORM — quantity-weighted edge between a user and an item.

Invariants:
    - (userid, itemid) is unique: one entry per pair
    - quantity >= 1; an entry that would drop to 0 is deleted instead
    - Deleting an item or user removes its entries (ON DELETE CASCADE)

Design Decisions:
    - Columns keep the userid/itemid names of the existing schema; attributes are snake_case
    - No updated_at: entries are created once and then merged/replaced in place
"""

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint, DateTime, ForeignKey, Integer, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from game_catalog.db.base import Base


class InventoryEntry(Base):
    """One user's holding of one item."""
    __tablename__ = "inventory"
    __table_args__ = (
        UniqueConstraint("userid", "itemid", name="uq_inventory_user_item"),
        CheckConstraint("quantity >= 1", name="ck_inventory_quantity_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        "userid", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    item_id: Mapped[int] = mapped_column(
        "itemid", Integer, ForeignKey("items.id", ondelete="CASCADE"), nullable=False,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    item: Mapped["Item"] = relationship("Item", lazy="selectin")
