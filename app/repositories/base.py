"""Generic async repository with soft-delete, sorting and pagination."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.pagination import PagedList, RequestParameters
from app.core.sorting import apply_ordering, build_ordering
from app.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository.

    Soft-deletes: rows with `deleted_at IS NOT NULL` are excluded from all
    standard reads. Hard-delete is intentionally never exposed.
    """

    model: type[ModelT]
    default_order_by: str = "name"

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self) -> Select:
        """Return a SELECT excluding soft-deleted rows."""
        q = select(self.model)
        if hasattr(self.model, "deleted_at"):
            q = q.where(self.model.deleted_at.is_(None))
        return q

    def find_by_condition(self, *criteria: Any) -> Select:
        return self._base_query().where(*criteria)

    def sorted(self, query: Select, order_by: str | None) -> Select:
        """Order *query* by a client `orderBy` string, primary key last for stable ties."""
        spec = build_ordering(self.model, order_by, self.default_order_by)
        return apply_ordering(query, self.model, spec).order_by(self.model.id.asc())

    async def paged(self, query: Select, parameters: RequestParameters) -> PagedList[ModelT]:
        return await PagedList.from_query(
            self._session,
            self.sorted(query, parameters.order_by),
            parameters.page_number,
            parameters.page_size,
        )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        result = await self._session.execute(
            self._base_query().where(self.model.id == entity_id)
        )
        return result.scalars().first()

    async def get_by_ids(self, ids: Sequence[str]) -> list[ModelT]:
        result = await self._session.execute(
            self._base_query().where(self.model.id.in_(list(ids)))
        )
        return list(result.scalars().all())

    async def list_all(self) -> list[ModelT]:
        result = await self._session.execute(self._base_query())
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        await self._session.refresh(instance)
        return instance

    async def update(self, entity_id: str, **kwargs: Any) -> ModelT | None:
        kwargs.pop("id", None)
        if "updated_at" not in kwargs and hasattr(self.model, "updated_at"):
            kwargs["updated_at"] = datetime.now(timezone.utc)

        await self._session.execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**kwargs)
            .execution_options(synchronize_session="fetch")
        )
        await self._session.flush()
        return await self.get_by_id(entity_id)

    async def soft_delete(self, entity_id: str) -> bool:
        result = await self._session.execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .where(self.model.deleted_at.is_(None))
            .values(deleted_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session="fetch")
        )
        await self._session.flush()
        return result.rowcount > 0
