"""
MyNotes Backend — SQL Note Store
==================================

What:  NoteStore implementation backed by an async SQLAlchemy session.
Why:   Durable storage in SQLite (default) or PostgreSQL.
How:   One store instance wraps the per-request session from session_scope().
       Every write commits before it returns, so a note is durable by the
       time the response reaches the client.

Query plans:
    list:        SELECT id, note FROM notes ORDER BY id
    get/update:  primary key lookup (session.get)
    delete:      primary key lookup + DELETE, so absence can be reported
    delete_all:  single DELETE FROM notes
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy import text as sql_text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mynotes.exceptions import DatabaseError
from mynotes.models.note import Note
from mynotes.services.note_store import NoteRecord, NoteStore, StoreResult

logger = logging.getLogger(__name__)


def _to_record(note: Note) -> NoteRecord:
    return NoteRecord(id=note.id, text=note.text)


class SqlNoteStore(NoteStore):
    """
    Note store over a single AsyncSession.

    Error Handling:
        SQLAlchemy errors are logged with their type and re-raised as
        DatabaseError, which the global handler renders as a generic 500.
        A missing row is not an error: it is reported as StoreResult.absent().
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_notes(self) -> List[NoteRecord]:
        try:
            result = await self.session.execute(select(Note).order_by(Note.id))
            return [_to_record(note) for note in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

    async def create(self, text: str) -> NoteRecord:
        note = Note(text=text)
        try:
            self.session.add(note)
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the note. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e
        return _to_record(note)

    async def get(self, note_id: int) -> StoreResult:
        try:
            note = await self.session.get(Note, note_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": note_id},
            ) from e

        if note is None:
            return StoreResult.absent()
        return StoreResult.found(_to_record(note))

    async def update(self, note_id: int, text: str) -> StoreResult:
        try:
            note = await self.session.get(Note, note_id)
            if note is None:
                return StoreResult.absent()
            note.text = text
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": note_id},
            ) from e
        return StoreResult.found(_to_record(note))

    async def delete(self, note_id: int) -> StoreResult:
        try:
            note = await self.session.get(Note, note_id)
            if note is None:
                return StoreResult.absent()
            removed = _to_record(note)
            await self.session.delete(note)
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": note_id},
            ) from e
        return StoreResult.found(removed)

    async def delete_all(self) -> int:
        try:
            result = await self.session.execute(delete(Note))
            await self.session.commit()
            # Drop identity-map entries for the rows just removed
            self.session.expunge_all()
        except SQLAlchemyError as e:
            logger.error("Database error clearing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete notes. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e
        return result.rowcount or 0

    async def ping(self) -> bool:
        try:
            await self.session.execute(sql_text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("SQL store unreachable: %s", str(e))
            return False
