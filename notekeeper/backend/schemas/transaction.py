"""
Note Transaction Schemas.

Pydantic schemas for the note audit history.
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from notekeeper.backend.models.transaction import ActionType


class NoteTransactionResponse(BaseModel):
    """One entry of a note's audit history."""

    transaction_id: str = Field(validation_alias=AliasChoices("transaction_id", "id"))
    note_id: str
    action_type: ActionType
    content_before: str | None
    content_after: str | None
    timestamp: datetime
    # Declarative models carry a class-level `metadata`, so `details` goes first.
    metadata: str | None = Field(validation_alias=AliasChoices("details", "metadata"))

    model_config = ConfigDict(from_attributes=True)
