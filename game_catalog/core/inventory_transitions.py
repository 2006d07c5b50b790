"""Inventory Transitions — quantity rules for a single (user, item) entry.

Invariants:
    - add requires a positive integer quantity and merges by addition
    - set with quantity > 0 replaces the stored value; quantity <= 0 removes the entry
    - A stored entry never holds quantity <= 0

Design Decisions:
    - plan_quantity_update returns an action descriptor; the ledger applies it
      inside its own transaction
"""

from enum import Enum

from game_catalog.core.errors import ValidationError


class QuantityAction(str, Enum):
    """What set_quantity does to an existing entry."""
    REPLACE = "replace"
    REMOVE = "remove"


def validate_add_quantity(quantity: int) -> int:
    """Return quantity if it is a positive integer, else raise ValidationError."""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError("Quantity must be a positive integer", "quantity")
    return quantity


def plan_quantity_update(quantity: int) -> QuantityAction:
    """Replace for positive quantities, remove otherwise."""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError("Quantity must be an integer", "quantity")
    return QuantityAction.REPLACE if quantity > 0 else QuantityAction.REMOVE
