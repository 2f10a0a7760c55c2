"""Pagination helpers for list endpoints."""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Annotated, Generic, TypeVar

from fastapi import Query
from pydantic import BaseModel, computed_field
from pydantic.alias_generators import to_camel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings

T = TypeVar("T")
U = TypeVar("U")


def clamp_page_number(page_number: int) -> int:
    return max(page_number, 1)


def clamp_page_size(page_size: int) -> int:
    return min(max(page_size, 1), settings.max_page_size)


class RequestParameters:
    """FastAPI dependency for `?pageNumber=1&pageSize=10&orderBy=name desc&fields=id,name`.

    Out-of-range paging values are clamped, never rejected.
    """

    def __init__(
        self,
        page_number: Annotated[int, Query(alias="pageNumber", description="Page number (1-based)")] = 1,
        page_size: Annotated[int, Query(alias="pageSize", description="Items per page")] = settings.default_page_size,
        order_by: Annotated[str | None, Query(alias="orderBy", description="e.g. `age desc,name`")] = None,
        fields: Annotated[str | None, Query(description="e.g. `name,age`")] = None,
    ):
        self.page_number = clamp_page_number(page_number)
        self.page_size = clamp_page_size(page_size)
        self.order_by = order_by
        self.fields = fields


class EmployeeParameters(RequestParameters):
    """Employee list parameters: paging plus an inclusive `minAge..maxAge` filter."""

    def __init__(
        self,
        page_number: Annotated[int, Query(alias="pageNumber", description="Page number (1-based)")] = 1,
        page_size: Annotated[int, Query(alias="pageSize", description="Items per page")] = settings.default_page_size,
        order_by: Annotated[str | None, Query(alias="orderBy", description="e.g. `age desc,name`")] = None,
        fields: Annotated[str | None, Query(description="e.g. `name,age`")] = None,
        min_age: Annotated[int, Query(alias="minAge", ge=0)] = 0,
        max_age: Annotated[int | None, Query(alias="maxAge", ge=0)] = None,
    ):
        super().__init__(page_number, page_size, order_by, fields)
        self.min_age = min_age
        self.max_age = max_age

    @property
    def valid_age_range(self) -> bool:
        return self.max_age is None or self.max_age > self.min_age


class PageMetaData(BaseModel):
    current_page: int
    total_pages: int
    page_size: int
    total_count: int

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }

    @computed_field(alias="hasPrevious")
    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @computed_field(alias="hasNext")
    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @classmethod
    def build(cls, total_count: int, page_number: int, page_size: int) -> "PageMetaData":
        return cls(
            current_page=page_number,
            total_pages=math.ceil(total_count / page_size),
            page_size=page_size,
            total_count=total_count,
        )


@dataclass
class PagedList(Generic[T]):
    """One page of an ordered sequence plus its position within the whole."""

    items: list[T]
    meta: PageMetaData

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def map(self, fn: Callable[[T], U]) -> "PagedList[U]":
        return PagedList([fn(item) for item in self.items], self.meta)

    @classmethod
    def from_sequence(cls, source: Sequence[T], page_number: int, page_size: int) -> "PagedList[T]":
        """Window an already materialized, ordered sequence."""
        page_number = clamp_page_number(page_number)
        page_size = clamp_page_size(page_size)
        start = (page_number - 1) * page_size
        items = list(source[start:start + page_size])
        return cls(items, PageMetaData.build(len(source), page_number, page_size))

    @classmethod
    async def from_query(
        cls, session: AsyncSession, query: Select, page_number: int, page_size: int
    ) -> "PagedList":
        """Count the filtered query, then fetch one OFFSET/LIMIT window of it."""
        page_number = clamp_page_number(page_number)
        page_size = clamp_page_size(page_size)

        count_q = select(func.count()).select_from(query.order_by(None).subquery())
        total = (await session.execute(count_q)).scalar_one()

        page_q = query.offset((page_number - 1) * page_size).limit(page_size)
        items = (await session.execute(page_q)).scalars().all()
        return cls(list(items), PageMetaData.build(total, page_number, page_size))
