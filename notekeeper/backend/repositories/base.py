"""
Base Repository.

Base class for all repositories with the shared persistence operations.
"""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.backend.core.exceptions import NotFoundError
from notekeeper.backend.core.logging import get_logger
from notekeeper.backend.models.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common persistence operations.

    Subclasses should set the model class:

        class NoteRepository(BaseRepository[Note]):
            model = Note

    Repositories flush but never commit. Committing belongs to the
    caller's unit of work.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, id: str | UUID) -> ModelType:
        """
        Get a single record by ID.

        Raises:
            NotFoundError: If record not found
        """
        instance = await self.get_by_id_or_none(id)

        if instance is None:
            raise NotFoundError(f"{self.model.__name__} not found with id: {id}")

        return instance

    async def get_by_id_or_none(self, id: str | UUID) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == str(id))
        )
        return result.scalar_one_or_none()

    async def save(self, instance: ModelType) -> ModelType:
        """
        Persist a new or modified record.

        New records get their primary key assigned by the flush.
        """
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance
