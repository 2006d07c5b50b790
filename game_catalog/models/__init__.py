"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Inventory entries are addressed by (user_id, item_id), never owned by one side

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from game_catalog.models.role import RoleModel  # noqa: F401
from game_catalog.models.user import User  # noqa: F401
from game_catalog.models.rarity import Rarity  # noqa: F401
from game_catalog.models.category import Category  # noqa: F401
from game_catalog.models.item import Item  # noqa: F401
from game_catalog.models.inventory_entry import InventoryEntry  # noqa: F401
