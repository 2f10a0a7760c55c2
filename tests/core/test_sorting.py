"""Sort expression building and application.

Tests cover:
    - `field[ desc]` tokens resolve to SortKeys in listed order
    - unknown tokens are dropped; nothing usable falls back to the default
    - only the exact lower-case `desc` flags a descending key
    - in-memory sorting is stable and multi-key
    - SQL ordering is added as column expressions
"""

from dataclasses import dataclass
from typing import Optional

import pytest
from sqlalchemy import select

from app.core.sorting import SortKey, apply_ordering, build_ordering, sort_records
from app.domain.employee import Employee


@dataclass
class Staff:
    name: str
    age: Optional[int]
    salary: float


# ─── build_ordering ──────────────────────────────────────────────

def test_age_desc_then_name():
    spec = build_ordering(Staff, "age desc,name", "name")
    assert spec == [SortKey("age", True), SortKey("name", False)]


@pytest.mark.parametrize("order_by", [None, "", "   ", ",", " , , "])
def test_empty_order_by_falls_back_to_default(order_by):
    assert build_ordering(Staff, order_by, "name") == [SortKey("name", False)]


@pytest.mark.parametrize("order_by", ["bogus", "bogus desc,nope", "salaryy, agee desc"])
def test_only_unknown_tokens_fall_back_to_default(order_by):
    assert build_ordering(Staff, order_by, "name") == [SortKey("name", False)]


def test_unknown_tokens_are_dropped_and_order_kept():
    spec = build_ordering(Staff, "bogus, salary desc ,nope, AGE", "name")
    assert spec == [SortKey("salary", True), SortKey("age", False)]


def test_duplicates_are_not_collapsed():
    spec = build_ordering(Staff, "age,age desc", "name")
    assert spec == [SortKey("age", False), SortKey("age", True)]


@pytest.mark.parametrize(
    "token, descending",
    [
        ("age desc", True),
        ("age    desc", True),
        ("age\tdesc", True),
        ("age DESC", False),
        ("age Desc", False),
        ("age descending", False),
        ("age asc", False),
        ("age", False),
    ],
)
def test_direction_requires_exact_desc(token, descending):
    assert build_ordering(Staff, token, "name") == [SortKey("age", descending)]


# ─── sort_records ────────────────────────────────────────────────

def test_sort_records_multi_key():
    rows = [Staff("b", 30, 1.0), Staff("a", 30, 2.0), Staff("c", 40, 3.0)]
    ordered = sort_records(rows, [SortKey("age", True), SortKey("name")])
    assert [r.name for r in ordered] == ["c", "a", "b"]


def test_sort_records_is_stable_on_ties():
    rows = [Staff("first", 30, 1.0), Staff("second", 30, 2.0), Staff("third", 20, 3.0)]
    ascending = sort_records(rows, [SortKey("age")])
    descending = sort_records(rows, [SortKey("age", True)])
    assert [r.name for r in ascending] == ["third", "first", "second"]
    assert [r.name for r in descending] == ["first", "second", "third"]


def test_sort_records_puts_none_first_ascending_and_last_descending():
    rows = [Staff("x", 25, 1.0), Staff("y", None, 1.0), Staff("z", 18, 1.0)]
    assert [r.name for r in sort_records(rows, [SortKey("age")])] == ["y", "z", "x"]
    assert [r.name for r in sort_records(rows, [SortKey("age", True)])] == ["x", "z", "y"]


def test_sort_records_does_not_mutate_input():
    rows = [Staff("b", 1, 1.0), Staff("a", 2, 1.0)]
    sort_records(rows, [SortKey("name")])
    assert [r.name for r in rows] == ["b", "a"]


# ─── apply_ordering ──────────────────────────────────────────────

def test_apply_ordering_emits_columns_in_order():
    query = apply_ordering(
        select(Employee), Employee, [SortKey("age", True), SortKey("name")]
    )
    assert "ORDER BY employees.age DESC, employees.name ASC" in str(query)
