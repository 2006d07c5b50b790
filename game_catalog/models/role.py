"""Role ORM — static actor roles (Admin, Player).

Invariants:
    - name is unique and matches a core.domain_types.Role value
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from game_catalog.db.base import Base


class RoleModel(Base):
    """Role reference row."""
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
