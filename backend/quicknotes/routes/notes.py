"""
QuickNotes Backend — Notes Route Handlers
===========================================

What:  GET /api/notes (list), POST /api/notes (create), DELETE /api/notes/{id}.
How:   Validates the request, makes exactly one NoteStore call, returns JSON.
Who:   Called by the notes page and by quicknotes.ui.state.NotesController.

Errors are raised, not returned: ValidationError → 400, NotFoundError → 404,
DatabaseError → 500, all formatted by the handlers in main.py.
"""

import logging
import re
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from quicknotes.database import get_db_session
from quicknotes.exceptions import NotFoundError, ValidationError
from quicknotes.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NoteCreate,
    NoteResponse,
)
from quicknotes.services.note_store import DeleteOutcome, note_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])

INVALID_ID_MESSAGE = "Invalid ID"

# ASCII digits only; int() alone would also accept "1_000" and non-Latin digits
_NOTE_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Largest value of the INTEGER primary key column
MAX_NOTE_ID = 2**31 - 1


def parse_note_id(raw: str) -> int:
    """
    Parse a path segment into a note id.

    Raises:
        ValidationError: `raw` is not an integer string
    """
    if not _NOTE_ID_PATTERN.fullmatch(raw):
        raise ValidationError(message=INVALID_ID_MESSAGE, field="id", context={"value": raw})
    return int(raw)


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all notes",
)
async def list_notes(
    response: Response,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> List[NoteResponse]:
    """
    Return every note as `{id, title, content}`.

    The UI re-fetches this after every mutation, so it must never be cached.
    """
    notes = await note_store.list_all(db)
    response.headers["Cache-Control"] = "no-store"
    return [NoteResponse.model_validate(note) for note in notes]


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteResponse,
    responses={
        201: {"description": "Note created", "model": NoteResponse},
        400: {"description": "Missing or blank title/content", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> NoteResponse:
    """Insert a note; the response carries the id the database assigned."""
    note = await note_store.insert(db, title=payload.title, content=payload.content)
    return NoteResponse.model_validate(note)


@router.delete(
    "/notes/{note_id}",
    response_model=MessageResponse,
    responses={
        200: {"description": "Note deleted", "model": MessageResponse},
        400: {"description": "Identifier is not an integer", "model": ErrorResponse},
        404: {"description": "No note with this identifier", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a note by ID",
)
async def delete_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> MessageResponse:
    """
    Delete one note.

    Args:
        note_id: Raw path segment. Parsed here rather than declared as `int`
                 so a bad value yields 400 {"error": "Invalid ID"} instead of
                 FastAPI's 422, and the store is never called for it.

    Outcomes:
        200: a note matched and was removed
        404: no note has this id (repeating a delete is therefore a 404)
    """
    parsed_id = parse_note_id(note_id)

    # Ids outside the column range cannot exist; skip the round trip
    if not 1 <= parsed_id <= MAX_NOTE_ID:
        raise NotFoundError(resource="note", resource_id=note_id)

    outcome = await note_store.delete_by_id(db, parsed_id)
    if outcome is DeleteOutcome.NOT_FOUND:
        raise NotFoundError(resource="note", resource_id=note_id)

    return MessageResponse(message="Note deleted")
