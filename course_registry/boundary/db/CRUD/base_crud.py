"""
Generic data access for UUID-keyed models.

Every method takes the caller's AsyncSession and at most flushes it:
commits and rollbacks belong to the application services, so a service
can group several CRUD calls into one transaction.

Dependencies: sqlalchemy
System role: Foundation for the course and student CRUD singletons
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from course_registry.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """Create, read, update and delete rows of one model class."""

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **fields: Any) -> ModelT:
        """
        Insert a row and load its server-side values.

        The flush assigns defaults (id, timestamps) so the returned
        instance is complete before the transaction commits.
        """
        instance = self.model(**fields)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_many(self, session: AsyncSession, ids: Sequence[UUID]) -> Sequence[ModelT]:
        """Rows whose id is in ids, in no particular order. Empty ids skip the query."""
        if not ids:
            return []
        result = await session.execute(select(self.model).where(self.model.id.in_(ids)))
        return result.scalars().all()

    async def get_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """
        Page through rows, oldest first.

        Args:
            session: Async database session
            limit: Page size, or None for every remaining row
            offset: Rows to skip

        Returns:
            Sequence of model instances ordered by created_at
        """
        stmt = select(self.model).order_by(self.model.created_at).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_by_id(self, session: AsyncSession, id: UUID, **fields: Any) -> ModelT | None:
        """
        Apply fields to one row with a single UPDATE ... RETURNING.

        Returns:
            The updated instance, or None if no row has that id
        """
        stmt = update(self.model).where(self.model.id == id).values(**fields).returning(self.model)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """Delete one row. Returns False if nothing matched."""
        result = await session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        result = await session.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None
