"""
MyNotes Backend — Notes Route Handlers
========================================

What:  The /notes endpoints: list, get, create, update, delete, delete-all.
Why:   HTTP surface of the service.
How:   Parses the path id and raw body, delegates to NoteService, renders
       the result. Errors are raised as exceptions and rendered by the
       global handlers in main.py.

Status codes:
    200  every success (including create)
    400  path id not a plain signed decimal (RequestValidationError), id
         outside the 64-bit range, empty or non-UTF-8 body (ValidationError)
    404  id not in the store (NotFoundError)

Route order matters: DELETE /notes/deleteAll is registered before
DELETE /notes/{note_id}, otherwise "deleteAll" would be parsed as an id.
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Request, Response
from fastapi.responses import PlainTextResponse

from mynotes.dependencies import Store
from mynotes.exceptions import ValidationError
from mynotes.schemas.note import ErrorResponse, NoteResponse
from mynotes.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])

# Ids are signed 64-bit integers: optional sign, ASCII digits, nothing else
NOTE_ID_PATTERN = r"^[+-]?[0-9]+$"
NOTE_ID_MIN = -(2**63)
NOTE_ID_MAX = 2**63 - 1


def parse_note_id(
    note_id: Annotated[str, Path(pattern=NOTE_ID_PATTERN, description="Note identifier")],
) -> int:
    """
    What:  Converts the raw {note_id} path segment into an int.
    Why:   Plain int coercion also accepts "1.0", "1_0" and padded values;
           those are bad ids (400) and must never reach the store.
    """
    value = int(note_id)
    if not NOTE_ID_MIN <= value <= NOTE_ID_MAX:
        raise ValidationError(
            message="Note id must be a 64-bit integer",
            field="note_id",
            context={"note_id": note_id},
        )
    return value


NoteId = Annotated[int, Depends(parse_note_id)]

# The body is raw text, whatever Content-Type the client declares
TEXT_BODY = {
    "requestBody": {
        "required": True,
        "content": {"text/plain": {"schema": {"type": "string"}}},
    }
}


async def read_note_text(request: Request) -> str:
    """
    What:  Reads the raw request body as the note text.
    Why:   Notes are posted as plain text, not JSON; the body is kept byte-for-byte.
    """
    body = await request.body()
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        raise ValidationError(message="Note text must be valid UTF-8", field="body")


NoteText = Annotated[str, Depends(read_note_text)]


@router.get(
    "",
    response_model=List[NoteResponse],
    responses={200: {"description": "All notes, ascending id"}},
    summary="List all notes",
)
async def list_notes(store: Store) -> List[NoteResponse]:
    notes = await note_service.list_notes(store)
    return [NoteResponse.model_validate(note) for note in notes]


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={
        200: {"description": "Note found"},
        400: {"description": "Invalid Id", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(note_id: NoteId, store: Store) -> NoteResponse:
    note = await note_service.get_note(store, note_id)
    return NoteResponse.model_validate(note)


@router.post(
    "",
    response_model=NoteResponse,
    responses={
        200: {"description": "Note successfully created"},
        400: {"description": "No note to add", "model": ErrorResponse},
    },
    summary="Create a note from a plain-text body",
    openapi_extra=TEXT_BODY,
)
async def add_note(text: NoteText, store: Store) -> NoteResponse:
    note = await note_service.create_note(store, text)
    return NoteResponse.model_validate(note)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses={
        200: {"description": "Note successfully edited"},
        400: {"description": "Invalid input", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Replace the text of a note",
    openapi_extra=TEXT_BODY,
)
async def edit_note(note_id: NoteId, text: NoteText, store: Store) -> NoteResponse:
    note = await note_service.update_note(store, note_id, text)
    return NoteResponse.model_validate(note)


@router.delete(
    "/deleteAll",
    response_class=Response,
    responses={200: {"description": "All notes deleted"}},
    summary="Delete every note",
)
async def delete_all(store: Store) -> Response:
    await note_service.delete_all(store)
    return Response(status_code=200)


@router.delete(
    "/{note_id}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Note successfully deleted"},
        400: {"description": "Invalid Id", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Delete a single note",
)
async def delete_note(note_id: NoteId, store: Store) -> PlainTextResponse:
    message = await note_service.delete_note(store, note_id)
    return PlainTextResponse(message)
