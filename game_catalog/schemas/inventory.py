"""Inventory Schemas — add/update bodies and entry payloads.

Invariants:
    - InventoryAdd.quantity >= 1 (default 1)
    - InventoryQuantityUpdate.quantity may be <= 0: that removes the entry
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from game_catalog.schemas.item import ItemRead


class InventoryAdd(BaseModel):
    """Add (merge) an item into an inventory."""
    item_id: int = Field(ge=1, validation_alias=AliasChoices("item_id", "itemid"))
    quantity: int = Field(1, ge=1)


class InventoryQuantityUpdate(BaseModel):
    """Replace the stored quantity."""
    quantity: int


class InventoryEntryRead(BaseModel):
    """One inventory entry with item detail."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    item_id: int
    quantity: int
    created_at: datetime
    item: ItemRead


class InventoryQuantityResult(BaseModel):
    """Outcome of a quantity replacement."""
    user_id: int
    item_id: int
    quantity: int
    removed: bool = False
