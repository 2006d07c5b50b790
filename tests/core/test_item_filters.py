"""Item Filters — filter value object and LIKE pattern building.

Tests:
    - ItemFilter is immutable with unconstrained defaults
    - A blank name fragment imposes no constraint; others are trimmed
    - contains_pattern wraps the term and escapes LIKE wildcards
    - normalize_search_query trims and rejects blank input with a field-tagged error
"""

import dataclasses

import pytest

from game_catalog.core.errors import ValidationError
from game_catalog.core.item_filters import (
    ItemFilter, contains_pattern, normalize_search_query,
)


def test_filter_defaults_impose_no_constraint():
    f = ItemFilter()
    assert (f.category_id, f.rarity_id, f.min_level, f.name) == (None, None, None, None)


def test_filter_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ItemFilter().min_level = 3


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_imposes_no_constraint(name):
    assert ItemFilter(name=name).name is None


def test_name_fragment_is_trimmed():
    assert ItemFilter(name="  sword ").name == "sword"


def test_contains_pattern_wraps_term():
    assert contains_pattern("sword") == "%sword%"


def test_contains_pattern_escapes_wildcards():
    assert contains_pattern("100%_off") == "%100\\%\\_off%"


def test_contains_pattern_escapes_escape_char():
    assert contains_pattern("a\\b") == "%a\\\\b%"


def test_search_query_is_trimmed():
    assert normalize_search_query("  iron ") == "iron"


@pytest.mark.parametrize("query", ["", "   ", None, "\t\n"])
def test_blank_search_query_rejected(query):
    with pytest.raises(ValidationError) as exc_info:
        normalize_search_query(query)
    assert exc_info.value.field == "query"
    assert exc_info.value.http_status == 400
