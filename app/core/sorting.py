"""Parse `?orderBy=age desc,name` into a validated multi-key ordering."""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter
from typing import Any, NamedTuple, TypeVar

from sqlalchemy import Select

from app.core.property_names import resolve_property_name

T = TypeVar("T")

_DESCENDING = "desc"


class SortKey(NamedTuple):
    field: str
    descending: bool = False


SortSpec = list[SortKey]


def build_ordering(record_type: type, order_by: str | None, default_field: str) -> SortSpec:
    """Turn a comma-separated `field[ desc]` list into a SortSpec.

    Tokens naming an unknown attribute are dropped. First-listed keys take
    precedence and repeated fields are kept as-is. When nothing usable
    remains the default field, ascending, is returned.
    """
    default = [SortKey(default_field)]
    if not order_by or not order_by.strip():
        return default

    spec: SortSpec = []
    for token in order_by.split(","):
        token = token.strip()
        if not token:
            continue
        candidate, *rest = token.split(None, 1)
        field = resolve_property_name(record_type, candidate)
        if field is None:
            continue
        descending = bool(rest) and rest[0].strip() == _DESCENDING
        spec.append(SortKey(field, descending))

    return spec or default


def apply_ordering(query: Select, model: type, spec: SortSpec) -> Select:
    """Append ORDER BY clauses for *spec* to a SELECT over *model*."""
    clauses = []
    for key in spec:
        column = getattr(model, key.field)
        clauses.append(column.desc() if key.descending else column.asc())
    return query.order_by(*clauses)


def _null_first(value: Any) -> tuple[bool, Any]:
    return (value is not None, value)


def sort_records(records: Iterable[T], spec: SortSpec) -> list[T]:
    """Stable in-memory sort of *records* by *spec*.

    Applies one stable pass per key, last key first, so the first key ends up
    dominant and fully tied records keep their input order.
    """
    result = list(records)
    for key in reversed(spec):
        getter = attrgetter(key.field)
        result.sort(key=lambda record: _null_first(getter(record)), reverse=key.descending)
    return result
