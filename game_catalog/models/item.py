"""Item ORM — catalog entry for a game object.

Invariants:
    - price >= 0, levelreq >= 1 (CHECK constraints)
    - stats is a JSON object of scalar values
    - category and rarity are optional ("uncategorized" / "unrated") and eagerly loaded

Design Decisions:
    - Column is named levelreq for compatibility with existing data;
      the attribute is level_requirement
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    JSON, Boolean, CheckConstraint, DateTime, ForeignKey, Integer, String, Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from game_catalog.db.base import Base


class Item(Base):
    """Catalog item."""
    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_items_price_non_negative"),
        CheckConstraint("levelreq >= 1", name="ck_items_levelreq_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    level_requirement: Mapped[int] = mapped_column(
        "levelreq", Integer, nullable=False, default=1,
    )
    stats: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    is_tradable: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True,
    )
    rarity_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("rarities.id", ondelete="SET NULL"), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    category: Mapped[Optional["Category"]] = relationship("Category", lazy="selectin")
    rarity: Mapped[Optional["Rarity"]] = relationship("Rarity", lazy="selectin")
