"""
MyNotes Backend — FastAPI Dependencies
========================================

What:  Resolves the NoteStore a request works against.
How:   NOTE_STORE=sql   → a SqlNoteStore over a fresh per-request session
                          (the store commits each write itself)
       NOTE_STORE=memory → the process-wide MemoryNoteStore
Who:   Injected into every /notes route and the health check.

Tests override get_note_store through app.dependency_overrides.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends

from mynotes.config import settings
from mynotes.database import session_scope
from mynotes.services.memory_store import MemoryNoteStore
from mynotes.services.note_store import NoteStore
from mynotes.services.sql_store import SqlNoteStore

# One shared instance: the memory store only lives as long as the process
memory_store = MemoryNoteStore()


async def get_note_store() -> AsyncGenerator[NoteStore, None]:
    if settings.note_store == "memory":
        yield memory_store
        return

    async with session_scope() as session:
        yield SqlNoteStore(session)


# Type alias for the note store dependency
Store = Annotated[NoteStore, Depends(get_note_store)]
