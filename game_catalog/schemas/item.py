"""Item Schemas — catalog payloads, rarity tiers, and stat bags.

Invariants:
    - price >= 0, level_requirement >= 1 (default 1)
    - stats values are strict scalars: bool | int | float | str (no nesting)
    - ItemUpdate rejects explicit nulls on non-nullable columns

Design Decisions:
    - Strict scalar types in the stats union: "1" stays a string and True stays a
      bool instead of being coerced, so stored JSON round-trips unchanged
    - Legacy camel/flat keys (levelReq, categoryid, rarityid, imageUrl, isTradable)
      accepted on input; output is snake_case
"""

from datetime import datetime
from typing import Annotated, Union

from pydantic import (
    AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictFloat,
    StrictInt, StrictStr, field_validator,
)

StatScalar = Annotated[
    Union[StrictBool, StrictInt, StrictFloat, StrictStr],
    Field(union_mode="left_to_right"),
]
StatsBag = dict[str, StatScalar]

_NON_NULLABLE_ON_UPDATE = ("name", "price", "level_requirement", "stats", "is_tradable")


class RarityRead(BaseModel):
    """Rarity tier."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color_code: str
    drop_chance: float | None = None


class CategorySummary(BaseModel):
    """Category reference embedded in an item."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ItemCreate(BaseModel):
    """Item creation body."""
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    image_url: str | None = Field(
        None, max_length=255, validation_alias=AliasChoices("image_url", "imageUrl"),
    )
    price: int = Field(ge=0)
    level_requirement: int = Field(
        1, ge=1,
        validation_alias=AliasChoices("level_requirement", "levelReq", "levelreq"),
    )
    category_id: int | None = Field(
        None, ge=1, validation_alias=AliasChoices("category_id", "categoryid"),
    )
    rarity_id: int | None = Field(
        None, ge=1, validation_alias=AliasChoices("rarity_id", "rarityid"),
    )
    stats: StatsBag = Field(default_factory=dict)
    is_tradable: bool = Field(
        True, validation_alias=AliasChoices("is_tradable", "isTradable"),
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v


class ItemUpdate(BaseModel):
    """Partial item update."""
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    image_url: str | None = Field(
        None, max_length=255, validation_alias=AliasChoices("image_url", "imageUrl"),
    )
    price: int | None = Field(None, ge=0)
    level_requirement: int | None = Field(
        None, ge=1,
        validation_alias=AliasChoices("level_requirement", "levelReq", "levelreq"),
    )
    category_id: int | None = Field(
        None, ge=1, validation_alias=AliasChoices("category_id", "categoryid"),
    )
    rarity_id: int | None = Field(
        None, ge=1, validation_alias=AliasChoices("rarity_id", "rarityid"),
    )
    stats: StatsBag | None = None
    is_tradable: bool | None = Field(
        None, validation_alias=AliasChoices("is_tradable", "isTradable"),
    )

    @field_validator(*_NON_NULLABLE_ON_UPDATE)
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ItemRead(BaseModel):
    """Item with category and rarity expanded."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    image_url: str | None = None
    price: int
    level_requirement: int
    category_id: int | None = None
    rarity_id: int | None = None
    stats: StatsBag = Field(default_factory=dict)
    is_tradable: bool
    created_at: datetime
    updated_at: datetime
    category: CategorySummary | None = None
    rarity: RarityRead | None = None
