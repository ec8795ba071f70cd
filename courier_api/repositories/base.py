"""Generic async repository: one query or mutation per method."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository over an integer-keyed model.

    Deletes are hard deletes; the schema has no soft-delete column.
    """

    model: type[ModelT]
    # Column names used when the caller does not ask for a specific order
    default_order: tuple[str, ...] = ("id",)

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self):
        return select(self.model)

    def _order(self, q, order_by: tuple[str, ...] | None, order: str = "asc"):
        for name in order_by or self.default_order:
            col = getattr(self.model, name, None)
            if col is not None:
                q = q.order_by(col.desc() if order == "desc" else col.asc())
        return q

    def _filtered(self, q, filters: dict[str, Any] | None):
        """Apply simple equality filters, skipping ``None`` values."""
        if filters:
            for col_name, value in filters.items():
                if value is not None and hasattr(self.model, col_name):
                    q = q.where(getattr(self.model, col_name) == value)
        return q

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: int, *, refresh: bool = False) -> ModelT | None:
        q = self._base_query().where(self.model.id == entity_id)
        if refresh:
            q = q.execution_options(populate_existing=True)
        result = await self._session.execute(q)
        return result.scalars().first()

    async def list_all(
        self,
        *,
        order_by: tuple[str, ...] | None = None,
        order: str = "asc",
        filters: dict[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[ModelT]:
        q = self._order(self._filtered(self._base_query(), filters), order_by, order)
        if limit is not None:
            q = q.limit(limit)
        items = (await self._session.execute(q)).scalars().all()
        return list(items)

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int = 20,
        order_by: tuple[str, ...] | None = None,
        order: str = "asc",
        filters: dict[str, Any] | None = None,
        where: list | None = None,
    ) -> tuple[list[ModelT], int]:
        """Return (items, total_count) with pagination and optional column filters."""
        q = self._filtered(self._base_query(), filters)
        for clause in where or ():
            q = q.where(clause)

        # Count
        count_q = select(func.count()).select_from(q.subquery())
        total = (await self._session.execute(count_q)).scalar_one()

        # Order + paginate
        q = self._order(q, order_by, order).offset(offset).limit(limit)

        items = (await self._session.execute(q)).scalars().all()
        return list(items), total

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        q = self._filtered(select(func.count()).select_from(self.model), filters)
        return (await self._session.execute(q)).scalar_one()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        await self._session.refresh(instance)
        return instance

    async def create_many(self, rows: list[dict[str, Any]]) -> int:
        self._session.add_all([self.model(**row) for row in rows])
        await self._session.flush()
        return len(rows)

    async def update(self, entity_id: int, **kwargs: Any) -> ModelT | None:
        from datetime import datetime, timezone

        kwargs.pop("id", None)
        if "updated_at" not in kwargs and hasattr(self.model, "updated_at"):
            kwargs["updated_at"] = datetime.now(timezone.utc)

        await self._session.execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**kwargs)
        )
        await self._session.flush()
        return await self.get_by_id(entity_id, refresh=True)

    async def delete(self, entity_id: int) -> bool:
        result = await self._session.execute(
            delete(self.model).where(self.model.id == entity_id)
        )
        await self._session.flush()
        return result.rowcount > 0

    async def delete_where(self, filters: dict[str, Any]) -> int:
        q = delete(self.model)
        for col_name, value in filters.items():
            q = q.where(getattr(self.model, col_name) == value)
        result = await self._session.execute(q)
        await self._session.flush()
        return result.rowcount
