"""
Note Schemas.

Pydantic schemas for note API request/response validation.
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from notekeeper.backend.models.note import TITLE_MAX_LENGTH, Priority


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Note title",
        examples=["Groceries"],
    )
    content: str = Field(
        default="",
        description="Note content",
        examples=["Milk\nEggs\nBread"],
    )


class NoteContentUpdate(BaseModel):
    """Schema for replacing a note's content. The title follows the first line."""

    content: str = Field(
        ...,
        description="New note content",
        examples=["Buy milk\nand eggs"],
    )


class NotePriorityUpdate(BaseModel):
    """Schema for pinning or unpinning a note."""

    pinned: bool = Field(
        ...,
        validation_alias=AliasChoices("pinned", "isPinned"),
        description="True sets priority High, False sets Medium",
    )


class NoteResponse(BaseModel):
    """Schema for note in API responses."""

    id: str = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    priority: Priority = Field(description="Note priority")
    is_active: bool = Field(description="False once the note is deleted")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)
