"""
Note Repository.

Data access layer for notes. Handles all database operations
for the Note model.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.backend.models.note import Note
from notekeeper.backend.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Inherits save and lookup operations from BaseRepository
    and adds note-specific queries.
    """

    model = Note

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_all_active(self) -> list[Note]:
        """
        Get all notes that have not been soft-deleted.

        Returns:
            List of active notes, newest first
        """
        result = await self.session.execute(
            select(Note)
            .where(Note.is_active == True)  # noqa: E712
            .order_by(Note.created_at.desc())
        )
        return list(result.scalars().all())
