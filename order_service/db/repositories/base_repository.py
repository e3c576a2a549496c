"""
Base repository - generic async CRUD over one ORM model.
Challenge: Consistent data access, testability, paging and sorting in one place.
"""

from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from order_service.core.pagination import Page, PageRequest
from order_service.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses bind the model."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> ModelType | None:
        """Fetch single entity by primary key."""
        result = await self.session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()

    async def get_page(self, request: PageRequest) -> Page[ModelType]:
        """One page plus total count. Sorted by the request's criteria, then by id for stable paging."""
        order_by = []
        for order in request.sort:
            column = getattr(self.model, order.property)
            order_by.append(column.desc() if order.descending else column.asc())
        if not any(o.property == "id" for o in request.sort):
            order_by.append(self.model.id.asc())
        result = await self.session.execute(
            select(self.model).order_by(*order_by).offset(request.offset).limit(request.size)
        )
        return Page(list(result.scalars().all()), await self.count(), request)

    async def add(self, entity: ModelType) -> ModelType:
        """Insert new entity. Flush assigns the id; caller's session commits."""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def merge(self, entity: ModelType) -> ModelType:
        """Copy entity state onto the existing row with the same primary key."""
        merged = await self.session.merge(entity)
        await self.session.flush()
        await self.session.refresh(merged)
        return merged

    async def save(self, entity: ModelType) -> ModelType:
        """Update the row with entity.id if there is one, otherwise insert under a new generated id.

        Ids are never taken from the caller for inserts: an explicit id would not advance the
        PostgreSQL sequence and a later insert would collide with it.
        """
        if entity.id is not None and await self.get_by_id(entity.id) is not None:
            return await self.merge(entity)
        entity.id = None
        return await self.add(entity)

    async def delete_by_id(self, id: int) -> None:
        """Remove the row if present. Deleting a missing id is a no-op."""
        entity = await self.get_by_id(id)
        if entity is not None:
            await self.session.delete(entity)
            await self.session.flush()
