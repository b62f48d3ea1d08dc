"""
MyNotes Backend — In-Memory Note Store
========================================

What:  NoteStore implementation keeping notes in a process-local dict.
Why:   Zero-setup backend for local runs and tests (NOTE_STORE=memory).
How:   Dict keyed by id; a counter hands out ids and is never rewound, so
       ids are not reused after delete or delete_all.

Thread Safety:
    Mutations and reads run under one asyncio.Lock. Safe for a single
    uvicorn worker; every worker process would otherwise hold its own notes.
"""

import asyncio
import logging
from typing import Dict, List

from mynotes.services.note_store import NoteRecord, NoteStore, StoreResult

logger = logging.getLogger(__name__)


class MemoryNoteStore(NoteStore):
    """Dict-backed note store. Records are immutable, so they are shared freely."""

    def __init__(self):
        self._notes: Dict[int, NoteRecord] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def list_notes(self) -> List[NoteRecord]:
        async with self._lock:
            return [self._notes[note_id] for note_id in sorted(self._notes)]

    async def create(self, text: str) -> NoteRecord:
        async with self._lock:
            self._last_id += 1
            record = NoteRecord(id=self._last_id, text=text)
            self._notes[record.id] = record
            return record

    async def get(self, note_id: int) -> StoreResult:
        async with self._lock:
            record = self._notes.get(note_id)
        if record is None:
            return StoreResult.absent()
        return StoreResult.found(record)

    async def update(self, note_id: int, text: str) -> StoreResult:
        async with self._lock:
            if note_id not in self._notes:
                return StoreResult.absent()
            record = NoteRecord(id=note_id, text=text)
            self._notes[note_id] = record
        return StoreResult.found(record)

    async def delete(self, note_id: int) -> StoreResult:
        async with self._lock:
            record = self._notes.pop(note_id, None)
        if record is None:
            return StoreResult.absent()
        return StoreResult.found(record)

    async def delete_all(self) -> int:
        async with self._lock:
            removed = len(self._notes)
            self._notes.clear()
        logger.debug("Cleared %d notes from memory store", removed)
        return removed

    async def ping(self) -> bool:
        return True
