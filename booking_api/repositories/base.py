"""
Generic async repository over one mapped table.

Repositories share the session and lock of the unit of work that created
them. Every statement runs under the lock so that tasks fanned out with
``gather_or_fail`` never issue concurrent operations on the same session.
"""

import asyncio
from typing import Any, Generic, Iterable, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from booking_api.core.exceptions import PersistenceError
from booking_api.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    model: Type[ModelType]
    # Foreign key column naming the owning row, for child tables
    parent_key: Optional[str] = None

    def __init__(self, session: AsyncSession, lock: asyncio.Lock):
        self.session = session
        self._lock = lock

    async def save(self, entity: ModelType) -> ModelType:
        async with self._lock:
            try:
                self.session.add(entity)
                await self.session.flush()
            except SQLAlchemyError as e:
                raise PersistenceError(
                    f"Failed to save {self.model.__name__}: {e}"
                ) from e
        return entity

    async def save_all(self, entities: Iterable[ModelType]) -> List[ModelType]:
        entities = list(entities)
        if not entities:
            return []
        async with self._lock:
            try:
                self.session.add_all(entities)
                await self.session.flush()
            except SQLAlchemyError as e:
                raise PersistenceError(
                    f"Failed to save {self.model.__name__} batch: {e}"
                ) from e
        return entities

    async def refresh(self, entity: ModelType) -> ModelType:
        async with self._lock:
            try:
                await self.session.refresh(entity)
            except SQLAlchemyError as e:
                raise PersistenceError(
                    f"Failed to reload {self.model.__name__}: {e}"
                ) from e
        return entity

    async def find_by_id(self, entity_id: Optional[str]) -> Optional[ModelType]:
        if entity_id is None:
            return None
        async with self._lock:
            try:
                return await self.session.get(self.model, entity_id)
            except SQLAlchemyError as e:
                raise PersistenceError(
                    f"Failed to load {self.model.__name__} {entity_id}: {e}"
                ) from e

    async def find_by_ids(self, entity_ids: Sequence[str]) -> List[ModelType]:
        if not entity_ids:
            return []
        return await self.scalars(
            select(self.model).where(self.model.id.in_(list(entity_ids)))
        )

    async def find_by_parent_id(self, parent_id: str) -> List[ModelType]:
        return await self.scalars(
            select(self.model).where(self._parent_column() == parent_id)
        )

    async def delete_by_parent_id(self, parent_id: str) -> int:
        result = await self.execute(
            delete(self.model).where(self._parent_column() == parent_id)
        )
        return result.rowcount

    async def scalars(self, stmt) -> List[Any]:
        async with self._lock:
            try:
                result = await self.session.execute(stmt)
                return list(result.scalars().all())
            except SQLAlchemyError as e:
                raise PersistenceError(
                    f"Query on {self.model.__name__} failed: {e}"
                ) from e

    async def scalar_one_or_none(self, stmt) -> Any:
        async with self._lock:
            try:
                result = await self.session.execute(stmt)
                return result.scalar_one_or_none()
            except SQLAlchemyError as e:
                raise PersistenceError(
                    f"Query on {self.model.__name__} failed: {e}"
                ) from e

    async def execute(self, stmt):
        async with self._lock:
            try:
                return await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise PersistenceError(
                    f"Statement on {self.model.__name__} failed: {e}"
                ) from e

    def _parent_column(self):
        if self.parent_key is None:
            raise TypeError(f"{type(self).__name__} has no parent key")
        return getattr(self.model, self.parent_key)
