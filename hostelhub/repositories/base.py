"""
Base Repository

Common database operations shared by the hostel repositories.
Uses SQLAlchemy async session for all operations.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hostelhub.models.orm.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Base repository with common CRUD operations.

    Subclasses set `model`, and `id_column` when the primary key is not `id`.
    """

    model: type[ModelT]
    id_column: str = "id"

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _pk(self) -> Any:
        return getattr(self.model, self.id_column)

    async def get_by_id(self, id: int) -> ModelT | None:
        """
        Get entity by primary key.

        Args:
            id: Entity id

        Returns:
            Entity or None if not found
        """
        result = await self.session.execute(select(self.model).where(self._pk() == id))
        return result.scalar_one_or_none()

    async def get_all(self, limit: int = 100, offset: int = 0) -> list[ModelT]:
        """
        Get all entities ordered by primary key.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip
        """
        result = await self.session.execute(
            select(self.model).order_by(self._pk()).limit(limit).offset(offset)
        )
        return list(result.scalars().all())

    async def create(self, entity: ModelT) -> ModelT:
        """
        Create a new entity.

        Returns:
            Created entity with generated id
        """
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        """Flush pending changes on an entity and reload it."""
        await self.session.flush()
        await self.session.refresh(entity)
        return entity
