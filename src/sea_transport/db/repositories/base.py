"""
sea_transport.db.repositories.base

Generic repository over a single mapped class.

Responsibilities:
- Lookup, existence checks, save (insert or merge by id) and delete by id.
- Paged listing with whitelisted sort columns.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import ColumnElement, delete, func, inspect, select
from sqlalchemy import exists as sql_exists
from sqlalchemy.ext.asyncio import AsyncSession

from sea_transport.db.base import Base
from sea_transport.errors import UnknownSortPropertyError
from sea_transport.pagination import Page, PageRequest, SortOrder

ModelT = TypeVar("ModelT", bound=Base)


class EntityRepo(Generic[ModelT]):
    model: ClassVar[type[Any]]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def entity_name(self) -> str:
        return self.model.__tablename__

    async def get(self, entity_id: int) -> ModelT | None:
        return await self._session.get(self.model, entity_id)

    async def exists(self, entity_id: int) -> bool:
        stmt = select(sql_exists().where(self.model.id == entity_id))
        return bool((await self._session.execute(stmt)).scalar())

    async def save(self, entity: ModelT) -> ModelT:
        # No id: INSERT. With id: copy state onto the persistent row.
        if entity.id is None:
            self._session.add(entity)
        else:
            entity = await self._session.merge(entity)
        await self._session.flush()
        return entity

    async def delete_by_id(self, entity_id: int) -> int:
        result = await self._session.execute(delete(self.model).where(self.model.id == entity_id))
        return result.rowcount or 0

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return int((await self._session.execute(stmt)).scalar_one())

    async def find_page(self, request: PageRequest) -> Page[ModelT]:
        order_by = self._order_by(request.sort)
        total = await self.count()
        stmt = (
            select(self.model)
            .order_by(*order_by)
            .offset(request.offset)
            .limit(request.size)
        )
        rows = list((await self._session.execute(stmt)).scalars().all())
        return Page(
            content=rows,
            number=request.page,
            size=request.size,
            total_elements=total,
            sort=request.sort,
        )

    def _order_by(self, sort: tuple[SortOrder, ...]) -> list[ColumnElement[Any]]:
        columns = inspect(self.model).columns
        clauses: list[ColumnElement[Any]] = []
        for order in sort:
            if order.prop not in columns:
                raise UnknownSortPropertyError(self.entity_name, order.prop)
            column = columns[order.prop]
            clauses.append(column.desc() if order.descending else column.asc())
        # id as the last key keeps page boundaries stable when sort values repeat.
        if not any(order.prop == "id" for order in sort):
            clauses.append(self.model.id.asc())
        return clauses
