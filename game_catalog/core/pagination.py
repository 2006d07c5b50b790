"""Pagination — page/size arithmetic and the response envelope metadata.

Invariants:
    - Pages are 1-indexed; page values below 1 normalize to 1
    - An omitted size takes the default; a given size is clamped to [1, max]
    - limit = size, offset = (page - 1) * size
    - totalPages = ceil(totalItems / itemsPerPage); currentPage is always the normalized page
"""

import math
from dataclasses import dataclass


DEFAULT_PAGE_SIZE: int = 10
MAX_PAGE_SIZE: int = 100


@dataclass(frozen=True)
class PageRequest:
    """Normalized page request."""
    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_query(
        cls,
        page: int | None = None,
        size: int | None = None,
        default_size: int = DEFAULT_PAGE_SIZE,
        max_size: int = MAX_PAGE_SIZE,
    ) -> "PageRequest":
        normalized_page = max(1, page) if page else 1
        normalized_size = default_size if size is None else size
        normalized_size = min(max(1, normalized_size), max_size)
        return cls(page=normalized_page, size=normalized_size)

    @property
    def limit(self) -> int:
        return self.size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


def build_page_meta(total_items: int, page_request: PageRequest) -> dict:
    """Envelope metadata for one page of a `total_items`-long result."""
    return {
        "totalItems": total_items,
        "itemsPerPage": page_request.limit,
        "totalPages": math.ceil(total_items / page_request.limit),
        "currentPage": page_request.page,
    }


def build_page(items: list, total_items: int, page_request: PageRequest) -> dict:
    """Uniform paginated envelope: {items, meta}."""
    return {"items": items, "meta": build_page_meta(total_items, page_request)}
