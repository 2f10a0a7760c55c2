"""Page windowing, request parameter clamping and page metadata.

Tests cover:
    - total_pages == ceil(total / size); page lengths add up to the total
    - out-of-range page number / size are clamped, never rejected
    - age range validation on EmployeeParameters
    - metadata serializes with camelCase keys
"""

import json
import math

import pytest

from app.core.config import settings
from app.core.pagination import (
    EmployeeParameters,
    PagedList,
    PageMetaData,
    RequestParameters,
)


# ─── PagedList.from_sequence ─────────────────────────────────────

def test_third_page_of_twenty_three():
    page = PagedList.from_sequence(list(range(23)), page_number=3, page_size=10)
    assert page.items == [20, 21, 22]
    assert page.meta.total_pages == 3
    assert page.meta.total_count == 23
    assert page.meta.current_page == 3


@pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 23, 50, 101])
@pytest.mark.parametrize("size", [1, 3, 10, 50])
def test_pages_cover_sequence_exactly(total, size):
    source = list(range(total))
    first = PagedList.from_sequence(source, 1, size)
    assert first.meta.total_pages == math.ceil(total / size)

    seen = []
    for number in range(1, first.meta.total_pages + 1):
        page = PagedList.from_sequence(source, number, size)
        assert len(page) <= size
        seen.extend(page)
    assert seen == source


def test_empty_source_has_zero_pages():
    page = PagedList.from_sequence([], 1, 10)
    assert page.items == []
    assert page.meta.total_pages == 0
    assert page.meta.has_next is False
    assert page.meta.has_previous is False


def test_page_past_the_end_is_empty_but_keeps_requested_number():
    page = PagedList.from_sequence(list(range(5)), 4, 10)
    assert page.items == []
    assert page.meta.current_page == 4
    assert page.meta.total_count == 5


def test_page_number_below_one_is_clamped():
    page = PagedList.from_sequence(list(range(5)), 0, 2)
    assert page.items == [0, 1]
    assert page.meta.current_page == 1


def test_map_keeps_metadata():
    page = PagedList.from_sequence(list(range(5)), 2, 2)
    mapped = page.map(str)
    assert mapped.items == ["2", "3"]
    assert mapped.meta is page.meta


# ─── RequestParameters ───────────────────────────────────────────

def test_request_parameter_defaults():
    params = RequestParameters()
    assert params.page_number == 1
    assert params.page_size == settings.default_page_size
    assert params.order_by is None
    assert params.fields is None


@pytest.mark.parametrize(
    "requested, expected",
    [(-5, 1), (0, 1), (1, 1), (25, 25), (50, 50), (51, 50), (10_000, 50)],
)
def test_page_size_is_clamped(requested, expected):
    assert RequestParameters(page_size=requested).page_size == expected


def test_page_number_is_clamped():
    assert RequestParameters(page_number=-2).page_number == 1
    assert RequestParameters(page_number=0).page_number == 1
    assert RequestParameters(page_number=3).page_number == 3


@pytest.mark.parametrize(
    "min_age, max_age, valid",
    [(0, None, True), (20, 30, True), (30, 30, False), (40, 30, False)],
)
def test_employee_age_range(min_age, max_age, valid):
    assert EmployeeParameters(min_age=min_age, max_age=max_age).valid_age_range is valid


# ─── PageMetaData ────────────────────────────────────────────────

def test_metadata_serializes_camel_case():
    meta = PageMetaData.build(total_count=23, page_number=2, page_size=10)
    assert json.loads(meta.model_dump_json(by_alias=True)) == {
        "currentPage": 2,
        "totalPages": 3,
        "pageSize": 10,
        "totalCount": 23,
        "hasPrevious": True,
        "hasNext": True,
    }
