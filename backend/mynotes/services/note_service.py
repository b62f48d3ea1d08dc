"""
MyNotes Backend — Note Service (Handler Logic)
================================================

What:  The business rules behind the /notes endpoints.
Why:   Keeps the two rules of this API in one place, independent of HTTP:
       1. An empty note body is rejected before the store is touched
       2. A store result of ABSENT becomes a NotFoundError (→ 404)
How:   Receives a NoteStore for each call and matches on its StoreResult.
Who:   Called by route handlers in routes/notes.py.

Design Decision:
    NoteService is stateless: the store is passed in per call, so the
    same singleton works over a per-request SQL session or the shared
    in-memory store.
"""

import logging
from typing import List

from mynotes.exceptions import NotFoundError, ValidationError
from mynotes.services.note_store import NoteRecord, NoteStore, StoreResult

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes(): all notes, ascending id
        - create_note() / update_note(): empty-text check, then store call
        - get_note() / delete_note(): store call, absence → NotFoundError
        - delete_all(): clear the store
    """

    @staticmethod
    def _require_text(text: str) -> None:
        # Whitespace-only, "null" and special characters are all valid bodies
        if text == "":
            raise ValidationError(message="Note text must not be empty", field="body")

    @staticmethod
    def _unwrap(result: StoreResult, note_id: int) -> NoteRecord:
        if not result.is_found:
            raise NotFoundError(resource="note", resource_id=str(note_id))
        return result.note

    async def list_notes(self, store: NoteStore) -> List[NoteRecord]:
        return await store.list_notes()

    async def get_note(self, store: NoteStore, note_id: int) -> NoteRecord:
        """
        Retrieve a single note by id.

        Raises:
            NotFoundError: The store reported the id as absent (→ 404)
        """
        return self._unwrap(await store.get(note_id), note_id)

    async def create_note(self, store: NoteStore, text: str) -> NoteRecord:
        """
        Store a new note.

        Raises:
            ValidationError: `text` is empty (→ 400); nothing is stored
        """
        self._require_text(text)
        note = await store.create(text)
        logger.info("Note %d created (%d chars)", note.id, len(text))
        logger.debug("Note %d text: %r", note.id, text)
        return note

    async def update_note(self, store: NoteStore, note_id: int, text: str) -> NoteRecord:
        """
        Replace the text of an existing note.

        The empty-text check runs first, so a rejected update never reaches
        the store and the existing text is left unchanged.

        Raises:
            ValidationError: `text` is empty (→ 400)
            NotFoundError: No note with this id (→ 404)
        """
        self._require_text(text)
        note = self._unwrap(await store.update(note_id, text), note_id)
        logger.info("Note %d updated (%d chars)", note.id, len(text))
        return note

    async def delete_note(self, store: NoteStore, note_id: int) -> str:
        """
        Delete a note and return the confirmation message.

        The message is wrapped in double quotes, so clients that parse the
        body as JSON get a string.

        Raises:
            NotFoundError: No note with this id (→ 404)
        """
        self._unwrap(await store.delete(note_id), note_id)
        logger.info("Note %d deleted", note_id)
        return f'"Successfully deleted note {note_id}"'

    async def delete_all(self, store: NoteStore) -> int:
        removed = await store.delete_all()
        logger.info("Deleted all notes (%d removed)", removed)
        return removed


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
