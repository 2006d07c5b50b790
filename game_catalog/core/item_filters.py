"""Item Filters — pure composition of catalog list filters and search terms.

Invariants:
    - ItemFilter is a conjunction; a None field imposes no constraint
    - The name fragment is trimmed; a blank fragment becomes None
    - Substring terms are matched case-insensitively with LIKE wildcards escaped
    - normalize_search_query rejects blank input before any storage access

Design Decisions:
    - Filter stays a plain dataclass: the service translates it to SQL clauses,
      keeping this module free of SQLAlchemy
"""

from dataclasses import dataclass

from game_catalog.core.errors import ValidationError


LIKE_ESCAPE_CHAR: str = "\\"


@dataclass(frozen=True)
class ItemFilter:
    """Independent predicates over the item catalog."""
    category_id: int | None = None
    rarity_id: int | None = None
    min_level: int | None = None
    name: str | None = None

    def __post_init__(self):
        # A blank name fragment is no constraint at all
        name = self.name.strip() if self.name else None
        object.__setattr__(self, "name", name or None)


def contains_pattern(term: str) -> str:
    """LIKE pattern matching `term` anywhere, with %, _ and the escape char escaped."""
    escaped = (
        term.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", LIKE_ESCAPE_CHAR + "%")
        .replace("_", LIKE_ESCAPE_CHAR + "_")
    )
    return f"%{escaped}%"


def normalize_search_query(query: str | None) -> str:
    """Trimmed search term. Raises ValidationError if empty after trimming."""
    term = (query or "").strip()
    if not term:
        raise ValidationError("Search query is required", "query")
    return term
