"""Category Arena — pure hierarchy logic over flat category records.

Invariants:
    - Categories are records indexed by id with a parent_id field; no object cycles
    - Subtrees are derived from an index keyed by parent_id, children sorted by id
    - Expansion is depth-limited: nodes past the limit carry subcategories=None
    - A re-parent is rejected when the new parent is the category itself (SelfParentError)
      or any of its descendants (CategoryCycleError)

Design Decisions:
    - Records whose parent_id names no record are treated as roots, so a
      dangling reference left by legacy data never hides a branch
    - Ancestor walk keeps a visited set: a cycle already present in stored
      data terminates instead of looping
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from game_catalog.core.errors import CategoryCycleError, SelfParentError


# Root listing shows roots, their children, and their grandchildren.
DEFAULT_EXPANSION_DEPTH: int = 2


@dataclass(frozen=True)
class CategoryRecord:
    """Flat category row as stored."""
    id: int
    name: str
    description: str | None = None
    parent_id: int | None = None


@dataclass
class CategoryNode:
    """Category with its subcategories expanded to a fixed depth."""
    id: int
    name: str
    description: str | None
    parent_id: int | None
    subcategories: list["CategoryNode"] | None = field(default=None)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "parent_id": self.parent_id,
            "subcategories": (
                None if self.subcategories is None
                else [child.to_dict() for child in self.subcategories]
            ),
        }


def index_by_parent(
    records: Iterable[CategoryRecord],
) -> dict[int | None, list[CategoryRecord]]:
    """Group records under their parent_id; orphans are grouped under None."""
    records = list(records)
    known_ids = {r.id for r in records}
    index: dict[int | None, list[CategoryRecord]] = defaultdict(list)
    for record in records:
        parent = record.parent_id if record.parent_id in known_ids else None
        index[parent].append(record)
    for children in index.values():
        children.sort(key=lambda r: r.id)
    return index


def expand(
    record: CategoryRecord,
    children_index: Mapping[int | None, list[CategoryRecord]],
    depth: int,
) -> CategoryNode:
    """Build a node whose subcategories are expanded `depth` levels down."""
    subcategories = None
    if depth > 0:
        subcategories = [
            expand(child, children_index, depth - 1)
            for child in children_index.get(record.id, [])
        ]
    return CategoryNode(
        id=record.id,
        name=record.name,
        description=record.description,
        parent_id=record.parent_id,
        subcategories=subcategories,
    )


def build_forest(
    records: Iterable[CategoryRecord], depth: int = DEFAULT_EXPANSION_DEPTH,
) -> list[CategoryNode]:
    """Top-level categories with `depth` levels of subcategories beneath them."""
    index = index_by_parent(records)
    return [expand(root, index, depth) for root in index.get(None, [])]


def build_subtree(
    records: Iterable[CategoryRecord],
    category_id: int,
    depth: int = DEFAULT_EXPANSION_DEPTH,
) -> CategoryNode | None:
    """One category with `depth` levels of subcategories, or None if absent."""
    records = list(records)
    target = next((r for r in records if r.id == category_id), None)
    if target is None:
        return None
    return expand(target, index_by_parent(records), depth)


def ancestors_of(category_id: int, parent_of: Mapping[int, int | None]) -> list[int]:
    """Ids from the direct parent up to the root, stopping at unknown ids."""
    chain: list[int] = []
    seen = {category_id}
    current = parent_of.get(category_id)
    while current is not None and current not in seen:
        chain.append(current)
        seen.add(current)
        current = parent_of.get(current)
    return chain


def check_reparent(
    category_id: int,
    new_parent_id: int | None,
    parent_of: Mapping[int, int | None],
) -> None:
    """Reject a parent assignment that would make the tree cyclic."""
    if new_parent_id is None:
        return
    if new_parent_id == category_id:
        raise SelfParentError(category_id)
    if category_id in ancestors_of(new_parent_id, parent_of):
        raise CategoryCycleError(category_id, new_parent_id)
