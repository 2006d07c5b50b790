"""User ORM — account with credentials and a role.

Invariants:
    - username and email are unique
    - password_hash is a bcrypt hash, never plaintext
    - role is eagerly loaded (selectin): the access policy reads it on every request

Design Decisions:
    - Role kept as a row rather than an Enum column: roles are reference data
      seeded by migration, the Enum lives in core and is matched by name
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from game_catalog.db.base import Base


class User(Base):
    """Catalog user."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("roles.id"), nullable=False,
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

    role: Mapped["RoleModel"] = relationship("RoleModel", lazy="selectin")
