"""
Note Service.

Business logic layer for notes. Every mutation of a note is written
together with exactly one audit record in the same unit of work.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.backend.core.utils import derive_title, utc_now
from notekeeper.backend.models.note import TITLE_MAX_LENGTH, Note, Priority
from notekeeper.backend.models.transaction import ActionType, NoteTransaction
from notekeeper.backend.repositories.note import NoteRepository
from notekeeper.backend.repositories.transaction import NoteTransactionRepository
from notekeeper.backend.schemas.note import NoteCreate
from notekeeper.backend.services.base import BaseService


class NoteService(BaseService):
    """
    Service for note business logic.

    Notes are soft-deleted only. Nothing stops a deleted note from being
    edited or re-prioritized, and nothing re-activates one.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.note_repo = NoteRepository(session)
        self.transaction_repo = NoteTransactionRepository(session)

    async def create_note(self, data: NoteCreate) -> Note:
        """
        Create a new note and log its creation.

        Args:
            data: Note creation data

        Returns:
            Created note, with its id assigned
        """
        self._log_operation("Creating note", title=data.title)

        now = utc_now()
        note = Note(
            title=data.title,
            content=data.content,
            priority=Priority.MEDIUM,
            is_active=True,
            created_at=now,
            updated_at=now,
        )

        note = await self._execute_db_operation(
            "create_note",
            self._save_with_transaction(
                note,
                ActionType.CREATE_NOTE,
                details=f"Note created with title: '{data.title}'",
                content_after=data.content,
            ),
        )

        self._log_debug("Note created", note_id=note.id)
        return note

    async def get_all_active_notes(self) -> list[Note]:
        """List every note that has not been deleted."""
        return await self.note_repo.get_all_active()

    async def update_note(self, note_id: str, new_content: str) -> Note:
        """
        Replace a note's content.

        The title becomes the first line of the new content,
        cut to 255 characters.

        Raises:
            NotFoundError: If note not found
        """
        note = await self.note_repo.get_by_id(note_id)

        self._log_operation("Updating note", note_id=note_id)

        content_before = note.content
        note.content = new_content
        note.title = derive_title(new_content, TITLE_MAX_LENGTH)
        note.updated_at = utc_now()

        return await self._execute_db_operation(
            "update_note",
            self._save_with_transaction(
                note,
                ActionType.UPDATE_NOTE,
                details="Note content updated.",
                content_before=content_before,
                content_after=new_content,
            ),
        )

    async def delete_note(self, note_id: str) -> None:
        """
        Soft-delete a note.

        Raises:
            NotFoundError: If note not found
        """
        note = await self.note_repo.get_by_id(note_id)

        self._log_operation("Deleting note", note_id=note_id)

        note.is_active = False
        note.updated_at = utc_now()

        await self._execute_db_operation(
            "delete_note",
            self._save_with_transaction(
                note,
                ActionType.DELETE_NOTE,
                details="Note marked as deleted.",
                content_before=note.content,
            ),
        )

    async def update_note_priority(self, note_id: str, is_pinned: bool) -> Note:
        """
        Pin (High) or unpin (Medium) a note.

        Args:
            note_id: Note ID to update
            is_pinned: Whether the note is pinned

        Returns:
            Updated note

        Raises:
            NotFoundError: If note not found
        """
        note = await self.note_repo.get_by_id(note_id)

        old_priority = note.priority
        new_priority = Priority.HIGH if is_pinned else Priority.MEDIUM

        self._log_operation(
            "Changing note priority",
            note_id=note_id,
            old_priority=old_priority.value,
            new_priority=new_priority.value,
        )

        note.priority = new_priority
        note.updated_at = utc_now()

        return await self._execute_db_operation(
            "update_note_priority",
            self._save_with_transaction(
                note,
                ActionType.SET_PRIORITY,
                details=(
                    f"Priority changed from '{old_priority.value}' "
                    f"to '{new_priority.value}'"
                ),
            ),
        )

    async def get_note_history(self, note_id: str) -> list[NoteTransaction]:
        """
        Get the audit history of a note, oldest first.

        Raises:
            NotFoundError: If note not found
        """
        await self.note_repo.get_by_id(note_id)
        return await self.transaction_repo.get_by_note_id_ordered(note_id)

    async def _save_with_transaction(
        self,
        note: Note,
        action_type: ActionType,
        details: str,
        content_before: str | None = None,
        content_after: str | None = None,
    ) -> Note:
        """Persist the note, then append its audit record."""
        note = await self.note_repo.save(note)
        sequence = await self.transaction_repo.next_sequence(note.id)

        await self.transaction_repo.save(
            NoteTransaction(
                note_id=note.id,
                action_type=action_type,
                content_before=content_before,
                content_after=content_after,
                timestamp=utc_now(),
                sequence=sequence,
                details=details,
            )
        )

        return note
