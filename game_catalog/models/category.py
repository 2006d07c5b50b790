"""Category ORM — self-referential tree node classifying items.

Invariants:
    - name is globally unique
    - parent_id references categories.id; deleting a parent nulls it (SET NULL)

Design Decisions:
    - No relationship() to children: subtrees are derived from the flat arena in
      core/category_tree.py, so the ORM never builds a cyclic object graph
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from game_catalog.db.base import Base


class Category(Base):
    """Category tree node."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    parent_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True,
    )
