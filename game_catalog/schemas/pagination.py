"""Pagination Schemas — the uniform {items, meta} envelope.

Invariants:
    - meta keys serialize as totalItems, itemsPerPage, totalPages, currentPage
    - currentPage is 1-indexed on every endpoint
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageMeta(BaseModel):
    """Pagination metadata for one page."""
    model_config = ConfigDict(populate_by_name=True)

    total_items: int = Field(alias="totalItems", ge=0)
    items_per_page: int = Field(alias="itemsPerPage", ge=1)
    total_pages: int = Field(alias="totalPages", ge=0)
    current_page: int = Field(alias="currentPage", ge=1)


class Page(BaseModel, Generic[T]):
    """One page of results plus metadata."""
    items: list[T]
    meta: PageMeta
