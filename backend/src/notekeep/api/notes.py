"""Notes API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ErrorResponse
from ..core.schemas.notes import NoteRequest, NoteResponse
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import require_authenticated
from ..security.policy import Identity

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    responses={401: {"model": ErrorResponse}},
)

_note_errors = {403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    identity: Identity = Depends(require_authenticated),
    session: AsyncSession = Depends(get_db_session),
):
    """List the caller's notes, most recently updated first."""
    note_service = NoteService(session)
    return await note_service.list_notes(identity)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteRequest,
    identity: Identity = Depends(require_authenticated),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    return await note_service.create_note(identity, request)


@router.get("/{note_id}", response_model=NoteResponse, responses=_note_errors)
async def get_note(
    note_id: UUID,
    identity: Identity = Depends(require_authenticated),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    return await note_service.get_note(note_id, identity)


@router.put("/{note_id}", response_model=NoteResponse, responses=_note_errors)
async def update_note(
    note_id: UUID,
    request: NoteRequest,
    identity: Identity = Depends(require_authenticated),
    session: AsyncSession = Depends(get_db_session),
):
    """Replace a note's title and content."""
    note_service = NoteService(session)
    return await note_service.update_note(note_id, identity, request)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_note_errors)
async def delete_note(
    note_id: UUID,
    identity: Identity = Depends(require_authenticated),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    await note_service.delete_note(note_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
