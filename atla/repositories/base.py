"""Generic async repository with windowed-count pagination and query timeouts."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from atla.core.config import settings
from atla.core.exceptions import QueryTimeoutError
from atla.core.filters import Comparator, Predicate
from atla.core.pagination import ListQuery
from atla.core.sorting import SortDirective
from atla.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository over an entity with an integer ``id``.

    Every statement runs under ``timeout`` seconds; an expired statement is
    cancelled and surfaces as :class:`QueryTimeoutError`, never as a partial
    result.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession, timeout: float | None = None):
        self._session = session
        self._timeout = settings.query_timeout_seconds if timeout is None else timeout

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _execute(self, statement):
        try:
            return await asyncio.wait_for(
                self._session.execute(statement), timeout=self._timeout
            )
        except asyncio.TimeoutError:
            logger.warning(
                "%s query exceeded %.2fs and was cancelled",
                self.model.__name__, self._timeout,
            )
            raise QueryTimeoutError() from None

    def _column(self, name: str) -> ColumnElement:
        return self.model.__table__.c[name]

    def _condition(self, predicate: Predicate) -> ColumnElement[bool]:
        col = self._column(predicate.column)
        value = predicate.value
        if predicate.comparator is Comparator.IEXACT:
            return func.lower(col) == str(value).lower()
        if predicate.comparator is Comparator.CONTAINS:
            return col.contains(str(value), autoescape=True)
        if predicate.comparator is Comparator.GTE:
            return col >= value
        if predicate.comparator is Comparator.LTE:
            return col <= value
        return col == value

    def _ordering(self, sort: SortDirective) -> tuple[ColumnElement, ColumnElement]:
        """Primary sort plus an ascending id tie-break so pages are stable."""
        col = self._column(sort.column)
        primary = col.desc() if sort.descending else col.asc()
        return primary, self._column("id").asc()

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        if entity_id < 1:
            return None
        result = await self._execute(
            select(self.model).where(self.model.id == entity_id)
        )
        return result.scalars().first()

    async def list(self, query: ListQuery) -> tuple[list[ModelT], int]:
        """Return (items, total_records) for one page of *query*.

        The total comes from ``count(*) OVER ()`` on the filtered set, so it is
        read from the returned rows; a page past the end reports 0.
        """
        total_col = func.count().over().label("total_records")
        q = select(self.model, total_col)
        for predicate in query.predicates:
            q = q.where(self._condition(predicate))
        q = q.order_by(*self._ordering(query.sort)).limit(query.limit).offset(query.offset)

        logger.debug(
            "Listing %s: sort=%s %s limit=%d offset=%d predicates=%s",
            self.model.__name__, query.sort.column, query.sort.direction.value,
            query.limit, query.offset, query.predicates,
        )
        rows = (await self._execute(q)).all()
        total = rows[0].total_records if rows else 0
        return [row[0] for row in rows], total

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        await self._session.refresh(instance)
        return instance

    async def update(self, entity_id: int, **kwargs: Any) -> ModelT | None:
        from datetime import datetime, timezone

        kwargs.pop("id", None)
        if "updated_at" not in kwargs:
            kwargs["updated_at"] = datetime.now(timezone.utc)

        await self._execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**kwargs)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()
        instance = await self.get_by_id(entity_id)
        if instance is not None:
            await self._session.refresh(instance)
        return instance

    async def delete(self, entity_id: int) -> bool:
        if entity_id < 1:
            return False
        result = await self._execute(
            delete(self.model).where(self.model.id == entity_id)
        )
        await self._session.flush()
        return result.rowcount > 0
