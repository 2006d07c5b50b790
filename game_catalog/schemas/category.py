"""Category Schemas — tree node payloads and create/update bodies.

Invariants:
    - name: 1-50 chars, stripped, non-empty
    - parent_id accepts the legacy "parentid" key as well
    - CategoryUpdate only carries the fields the client actually sent (exclude_unset)
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class CategoryCreate(BaseModel):
    """Category creation body."""
    name: str = Field(min_length=1, max_length=50)
    description: str | None = None
    parent_id: int | None = Field(
        None, ge=1, validation_alias=AliasChoices("parent_id", "parentid"),
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v


class CategoryUpdate(BaseModel):
    """Partial category update; parent_id=null promotes to a root."""
    name: str | None = Field(None, min_length=1, max_length=50)
    description: str | None = None
    parent_id: int | None = Field(
        None, ge=1, validation_alias=AliasChoices("parent_id", "parentid"),
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Name cannot be null")
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class CategoryRead(BaseModel):
    """Flat category."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    parent_id: int | None = None


class CategoryNodeRead(CategoryRead):
    """Category with expanded subcategories (null past the expansion depth)."""
    subcategories: list["CategoryNodeRead"] | None = None
