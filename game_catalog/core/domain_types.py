"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ItemId, CategoryId, RarityId wrap ints — never mix them in signatures
    - Roles are an Enum compared by value, never by free-form string
    - Stat values are scalars only (bool | int | float | str)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders and match the roles.name column
"""

from enum import Enum
from typing import NewType, Union


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
ItemId = NewType("ItemId", int)
CategoryId = NewType("CategoryId", int)
RarityId = NewType("RarityId", int)


# ─── Value Types ─────────────────────────────────────────────────

StatValue = Union[bool, int, float, str]
ItemStats = dict[str, StatValue]


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Actor roles — maps to the roles.name column."""
    ADMIN = "Admin"
    PLAYER = "Player"

    @classmethod
    def from_name(cls, name: str) -> "Role":
        """Exact lookup by stored name. Raises ValueError on unknown names."""
        return cls(name)
