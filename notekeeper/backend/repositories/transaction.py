"""
Note Transaction Repository.

Data access layer for the append-only note audit log.
Rows are insert-only.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.backend.models.transaction import NoteTransaction
from notekeeper.backend.repositories.base import BaseRepository


class NoteTransactionRepository(BaseRepository[NoteTransaction]):
    """Repository for NoteTransaction model."""

    model = NoteTransaction

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_by_note_id_ordered(self, note_id: str) -> list[NoteTransaction]:
        """
        Get the audit history of one note.

        Args:
            note_id: Note whose transactions to load

        Returns:
            Transactions for the note, oldest first
        """
        result = await self.session.execute(
            select(NoteTransaction)
            .where(NoteTransaction.note_id == note_id)
            .order_by(NoteTransaction.timestamp.asc(), NoteTransaction.sequence.asc())
        )
        return list(result.scalars().all())

    async def next_sequence(self, note_id: str) -> int:
        """Sequence number for the next record of this note, starting at 1."""
        result = await self.session.execute(
            select(func.coalesce(func.max(NoteTransaction.sequence), 0) + 1)
            .where(NoteTransaction.note_id == note_id)
        )
        return result.scalar_one()
