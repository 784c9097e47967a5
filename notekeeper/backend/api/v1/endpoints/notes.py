"""
Notes API Endpoints.

REST API endpoints for note management and the note audit history.
"""

from fastapi import APIRouter

from notekeeper.backend.core.dependencies import NoteServiceDep, RequestId
from notekeeper.backend.schemas.base import ApiResponse, ResponseMetadata
from notekeeper.backend.schemas.note import (
    NoteContentUpdate,
    NoteCreate,
    NotePriorityUpdate,
    NoteResponse,
)
from notekeeper.backend.schemas.transaction import NoteTransactionResponse

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[NoteResponse],
    status_code=201,
    summary="Create a note",
    description="Create a new note with a title and content.",
)
async def create_note(
    data: NoteCreate,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Create a new note."""
    note = await service.create_note(data)
    return ApiResponse(
        data=NoteResponse.model_validate(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "",
    response_model=ApiResponse[list[NoteResponse]],
    summary="List notes",
    description="Get every note that has not been deleted.",
)
async def list_notes(
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[list[NoteResponse]]:
    """List active notes."""
    notes = await service.get_all_active_notes()
    return ApiResponse(
        data=[NoteResponse.model_validate(note) for note in notes],
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.put(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Update a note",
    description="Replace the note content. The title becomes the first line.",
)
async def update_note(
    note_id: str,
    data: NoteContentUpdate,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Update a note's content."""
    note = await service.update_note(note_id, data.content)
    return ApiResponse(
        data=NoteResponse.model_validate(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.delete(
    "/{note_id}",
    status_code=204,
    summary="Delete a note",
    description="Mark a note as deleted. The row and its history are kept.",
)
async def delete_note(
    note_id: str,
    service: NoteServiceDep,
) -> None:
    """Soft-delete a note."""
    await service.delete_note(note_id)


@router.patch(
    "/{note_id}/priority",
    response_model=ApiResponse[NoteResponse],
    summary="Pin or unpin a note",
    description="Pinned notes get High priority, unpinned notes Medium.",
)
async def update_note_priority(
    note_id: str,
    data: NotePriorityUpdate,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Change a note's priority."""
    note = await service.update_note_priority(note_id, data.pinned)
    return ApiResponse(
        data=NoteResponse.model_validate(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{note_id}/transactions",
    response_model=ApiResponse[list[NoteTransactionResponse]],
    summary="Note history",
    description="Get the audit history of a note, oldest first.",
)
# Path the web client uses
@router.get(
    "/{note_id}/history",
    response_model=ApiResponse[list[NoteTransactionResponse]],
    include_in_schema=False,
)
async def get_note_history(
    note_id: str,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[list[NoteTransactionResponse]]:
    """Get a note's audit history."""
    transactions = await service.get_note_history(note_id)
    return ApiResponse(
        data=[NoteTransactionResponse.model_validate(t) for t in transactions],
        metadata=ResponseMetadata(request_id=request_id),
    )
