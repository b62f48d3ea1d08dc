"""
MyNotes Backend — Abstract Note Store Interface
=================================================

What:  Abstract base class defining the contract for note persistence.
Why:   The note service works against this interface only, so the backing
       store (SQL database, in-memory dict) can be swapped by configuration.
How:   Concrete stores inherit from NoteStore and implement every method.
Who:   Called by NoteService; implemented by SqlNoteStore and MemoryNoteStore.

Result Contract:
    Lookups by id never raise for a missing record. They return a
    StoreResult whose status is FOUND (with the record) or ABSENT. The
    caller decides what absence means; the API turns it into a 404.
    Anything else that goes wrong (lost connection, locked database)
    is raised, never reported as ABSENT.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class NoteRecord:
    """
    Immutable snapshot of a stored note.

    Stores hand out records, never their internal objects, so a caller
    holding a record cannot mutate the store behind its back.
    """
    id: int
    text: str


class StoreStatus(str, Enum):
    """Outcome of an id-addressed store operation."""
    FOUND = "found"
    ABSENT = "absent"


@dataclass(frozen=True)
class StoreResult:
    """
    What:  Explicit result of get/update/delete.
    How:   `status` says whether the id matched; `note` holds the matched
           record (after the update, or as it was before deletion).
    """
    status: StoreStatus
    note: Optional[NoteRecord] = None

    @classmethod
    def found(cls, note: NoteRecord) -> "StoreResult":
        return cls(status=StoreStatus.FOUND, note=note)

    @classmethod
    def absent(cls) -> "StoreResult":
        return cls(status=StoreStatus.ABSENT)

    @property
    def is_found(self) -> bool:
        return self.status is StoreStatus.FOUND


class NoteStore(ABC):
    """
    Abstract interface for note persistence.

    Contract:
        - Ids are assigned by the store, unique, and never reused after deletion
        - list_notes() returns notes in ascending id order
        - Text is stored and returned verbatim; the store does not validate it
        - update() on an absent id does not create a record

    Implementations:
        - SqlNoteStore: async SQLAlchemy session (SQLite, PostgreSQL)
        - MemoryNoteStore: process-local dict guarded by an asyncio.Lock
    """

    @abstractmethod
    async def list_notes(self) -> List[NoteRecord]:
        """Return every stored note, ascending by id. Empty list when empty."""
        ...

    @abstractmethod
    async def create(self, text: str) -> NoteRecord:
        """Store `text` under a newly assigned id and return the record."""
        ...

    @abstractmethod
    async def get(self, note_id: int) -> StoreResult:
        """Look up a note by id."""
        ...

    @abstractmethod
    async def update(self, note_id: int, text: str) -> StoreResult:
        """
        Replace the text of an existing note in place.

        Returns:
            FOUND with the updated record, or ABSENT (nothing written).
        """
        ...

    @abstractmethod
    async def delete(self, note_id: int) -> StoreResult:
        """
        Remove a note by id.

        Returns:
            FOUND with the removed record, or ABSENT (no-op).
        """
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        """Remove every note in one operation. Returns how many were removed."""
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """
        Check that the backing store is reachable.

        Who:     Called by the health check endpoint.
        Returns: True if the store answers, False otherwise (never raises).
        """
        ...
