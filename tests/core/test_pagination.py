"""Pagination — page normalization, limit/offset, and envelope metadata.

Tests:
    - page defaults to 1; values below 1 normalize to 1
    - size defaults to 10 and is clamped to [1, max]
    - limit = size, offset = (page - 1) * size
    - meta is camelCase with ceil'd totalPages and the normalized currentPage
"""

import pytest

from game_catalog.core.pagination import PageRequest, build_page, build_page_meta


def test_defaults():
    pr = PageRequest.from_query()
    assert (pr.page, pr.size) == (1, 10)


@pytest.mark.parametrize("page", [0, -3])
def test_page_below_one_normalizes_to_one(page):
    assert PageRequest.from_query(page=page).page == 1


def test_size_clamped_to_maximum():
    assert PageRequest.from_query(size=500).size == 100


@pytest.mark.parametrize("size", [0, -4])
def test_non_positive_size_clamped_to_one(size):
    assert PageRequest.from_query(size=size).size == 1


def test_custom_default_size():
    assert PageRequest.from_query(default_size=25).size == 25


def test_limit_and_offset():
    pr = PageRequest.from_query(page=3, size=20)
    assert pr.limit == 20
    assert pr.offset == 40


def test_first_page_offset_is_zero():
    assert PageRequest.from_query(page=1, size=10).offset == 0


def test_meta_keys_and_values():
    meta = build_page_meta(23, PageRequest(page=2, size=10))
    assert meta == {
        "totalItems": 23,
        "itemsPerPage": 10,
        "totalPages": 3,
        "currentPage": 2,
    }


def test_meta_for_empty_result():
    meta = build_page_meta(0, PageRequest())
    assert meta["totalPages"] == 0
    assert meta["currentPage"] == 1


def test_build_page_envelope():
    page = build_page(["a", "b"], 2, PageRequest())
    assert page["items"] == ["a", "b"]
    assert page["meta"]["totalItems"] == 2
