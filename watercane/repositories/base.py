"""Generic async repository with hard delete and simple equality filters."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from watercane.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository.

    Deletes are permanent. Repositories never enforce references between
    models; that is left to the services.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _filtered(self, stmt, filters: dict[str, Any] | None):
        if filters:
            for col_name, value in filters.items():
                if value is not None and hasattr(self.model, col_name):
                    stmt = stmt.where(getattr(self.model, col_name) == value)
        return stmt

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        result = await self._session.execute(
            select(self.model).where(self.model.id == entity_id)
        )
        return result.scalars().first()

    async def exists(self, entity_id: str) -> bool:
        return await self.get_by_id(entity_id) is not None

    async def list(
        self,
        *,
        order_by: str = "created_at",
        order: str = "desc",
        filters: dict[str, Any] | None = None,
    ) -> list[ModelT]:
        """Return every matching row, newest first by default."""
        q = self._filtered(select(self.model), filters)

        col = getattr(self.model, order_by, None)
        if col is not None:
            q = q.order_by(col.desc() if order == "desc" else col.asc())

        items = (await self._session.execute(q)).scalars().all()
        return list(items)

    async def column_by_ids(self, column: str, ids: Iterable[str]) -> dict[str, Any]:
        """Return ``{id: <column value>}`` for the given ids in a single query."""
        wanted = {i for i in ids if i}
        if not wanted:
            return {}
        col = getattr(self.model, column)
        result = await self._session.execute(
            select(self.model.id, col).where(self.model.id.in_(wanted))
        )
        return {row[0]: row[1] for row in result.all()}

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id + defaults
        await self._session.refresh(instance)
        return instance

    async def update(self, entity_id: str, **kwargs: Any) -> ModelT | None:
        instance = await self.get_by_id(entity_id)
        if instance is None:
            return None

        from datetime import datetime, timezone

        kwargs.pop("id", None)
        kwargs.pop("created_at", None)
        # Always bump updated_at, even when no other column changed
        if "updated_at" not in kwargs and hasattr(self.model, "updated_at"):
            kwargs["updated_at"] = datetime.now(timezone.utc)
        for key, value in kwargs.items():
            setattr(instance, key, value)
        await self._session.flush()
        await self._session.refresh(instance)
        return instance

    async def delete(self, entity_id: str) -> bool:
        instance = await self.get_by_id(entity_id)
        if instance is None:
            return False
        await self._session.delete(instance)
        await self._session.flush()
        return True

    async def delete_where(self, **filters: Any) -> int:
        """Delete every row matching all ``column == value`` filters; return the count."""
        if not filters:
            raise ValueError("delete_where requires at least one filter")
        stmt = delete(self.model)
        for col_name, value in filters.items():
            stmt = stmt.where(getattr(self.model, col_name) == value)
        result = await self._session.execute(
            stmt.execution_options(synchronize_session=False)
        )
        await self._session.flush()
        return result.rowcount
