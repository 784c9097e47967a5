"""
SQLAlchemy Base Model.

Base class for all database models with common fields and utilities.
"""

import enum
from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from notekeeper.backend.core.utils import utc_now


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid4())


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )


class UUIDMixin:
    """Mixin that adds a UUID primary key."""

    id: Mapped[str] = mapped_column(
        primary_key=True,
        default=new_id,
    )


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    """Persist enum values ("Medium"), not member names ("MEDIUM")."""
    return [member.value for member in enum_cls]
