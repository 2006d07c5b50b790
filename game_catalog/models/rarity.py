"""Rarity ORM — named drop tier with display color and drop chance.

Invariants:
    - name is unique
    - color_code is a #RRGGBB hex string
    - drop_chance is a percentage with two decimals, 0-100 inclusive (CHECK);
      tiers need not sum to 100
"""

from decimal import Decimal

from sqlalchemy import CheckConstraint, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from game_catalog.db.base import Base


class Rarity(Base):
    """Static rarity tier."""
    __tablename__ = "rarities"
    __table_args__ = (
        CheckConstraint(
            "drop_chance >= 0 AND drop_chance <= 100",
            name="ck_rarities_drop_chance_percentage",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    color_code: Mapped[str] = mapped_column(String(7), nullable=False)
    drop_chance: Mapped[Decimal | None] = mapped_column(
        Numeric(5, 2), nullable=True,
    )
