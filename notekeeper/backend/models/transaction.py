"""
Note Transaction Model.

Append-only audit log. One row per mutation applied to a note;
rows are never updated or deleted.
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from notekeeper.backend.core.utils import utc_now
from notekeeper.backend.models.base import Base, enum_values, new_id


class ActionType(str, enum.Enum):
    """Kind of mutation recorded by a NoteTransaction."""

    CREATE_NOTE = "CREATE_NOTE"
    UPDATE_NOTE = "UPDATE_NOTE"
    DELETE_NOTE = "DELETE_NOTE"
    SET_PRIORITY = "SET_PRIORITY"
    # Reserved, not produced by any service operation yet.
    STYLE_NOTE = "STYLE_NOTE"
    AUTO_SAVE = "AUTO_SAVE"


class NoteTransaction(Base):
    """
    Audit record for one note mutation.

    Content snapshots depend on the action:
        CREATE_NOTE   before=None, after=content
        UPDATE_NOTE   before=old content, after=new content
        DELETE_NOTE   before=content, after=None
        SET_PRIORITY  both None, priority change described in details
    """

    __tablename__ = "note_transactions"

    id: Mapped[str] = mapped_column(
        "transaction_id",
        primary_key=True,
        default=new_id,
    )
    note_id: Mapped[str] = mapped_column(
        ForeignKey("notes.id"),
        nullable=False,
        index=True,
    )
    action_type: Mapped[ActionType] = mapped_column(
        Enum(
            ActionType,
            name="note_action_type",
            native_enum=False,
            values_callable=enum_values,
        ),
        nullable=False,
    )
    content_before: Mapped[str | None] = mapped_column(Text, nullable=True)
    content_after: Mapped[str | None] = mapped_column(Text, nullable=True)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
    )
    # Position in the note's history; orders records sharing a timestamp
    sequence: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    # "metadata" is reserved on declarative classes
    details: Mapped[str | None] = mapped_column("metadata", Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<NoteTransaction(id={self.id}, note_id={self.note_id}, "
            f"action={self.action_type.value})>"
        )
