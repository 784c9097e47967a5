"""
Note Model.

Database model for notes. Notes are never physically deleted;
deletion flips is_active to False.
"""

import enum

from sqlalchemy import Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from notekeeper.backend.models.base import Base, TimestampMixin, UUIDMixin, enum_values

TITLE_MAX_LENGTH = 255


class Priority(str, enum.Enum):
    """Note priority. Pinned notes are High."""

    MEDIUM = "Medium"
    HIGH = "High"


class Note(UUIDMixin, TimestampMixin, Base):
    """
    Note database model.

    A titled text record with a priority and an active/inactive state.
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    priority: Mapped[Priority] = mapped_column(
        Enum(
            Priority,
            name="note_priority",
            native_enum=False,
            values_callable=enum_values,
        ),
        default=Priority.MEDIUM,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(
        default=True,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, active={self.is_active})>"
