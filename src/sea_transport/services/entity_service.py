"""
sea_transport.services.entity_service

Pass-through service shared by every entity.

Responsibilities:
- Save (create or full update) and commit.
- Merge provided fields into an existing row (partial update).
- Paged listing, single lookup and delete.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic

from sqlalchemy.ext.asyncio import AsyncSession

from sea_transport.db.repositories.base import EntityRepo, ModelT
from sea_transport.observability.logging import get_logger
from sea_transport.pagination import Page, PageRequest

log = get_logger(__name__)


class EntityService(Generic[ModelT]):
    repo_cls: ClassVar[type[EntityRepo[Any]]]

    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._repo: EntityRepo[ModelT] = self.repo_cls(session)

    @property
    def entity_name(self) -> str:
        return self._repo.entity_name

    async def save(self, entity: ModelT) -> ModelT:
        log.debug("service.save", entity=self.entity_name, entity_id=entity.id)
        saved = await self._repo.save(entity)
        await self._session.commit()
        return saved

    async def partial_update(self, entity_id: int, changes: dict[str, Any]) -> ModelT | None:
        """
        Copy every non-null value in ``changes`` onto the stored row.

        Null values are ignored, so required columns can never be cleared
        through a partial update. Returns None when the row does not exist.
        """

        log.debug("service.partial_update", entity=self.entity_name, entity_id=entity_id)
        existing = await self._repo.get(entity_id)
        if existing is None:
            return None
        for attr, value in changes.items():
            if value is not None:
                setattr(existing, attr, value)
        saved = await self._repo.save(existing)
        await self._session.commit()
        return saved

    async def find_all(self, page_request: PageRequest) -> Page[ModelT]:
        return await self._repo.find_page(page_request)

    async def find_one(self, entity_id: int) -> ModelT | None:
        return await self._repo.get(entity_id)

    async def exists(self, entity_id: int) -> bool:
        return await self._repo.exists(entity_id)

    async def delete(self, entity_id: int) -> None:
        log.debug("service.delete", entity=self.entity_name, entity_id=entity_id)
        await self._repo.delete_by_id(entity_id)
        await self._session.commit()
