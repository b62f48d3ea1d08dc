"""
MyNotes Backend — Note Service Unit Tests
===========================================

What:  Tests for NoteService business rules.
How:   Uses the spy_store mock (no real store), so each test can assert
       exactly which store calls were made.

What we test:
    ✅ Empty text is rejected before the store is called
    ✅ ABSENT store results become NotFoundError for get/update/delete
    ✅ Delete confirmation message format
    ✅ Found results are passed through unchanged
"""

import pytest

from mynotes.exceptions import NotFoundError, ValidationError
from mynotes.services.note_service import NoteService
from mynotes.services.note_store import NoteRecord, StoreResult


class TestNoteServiceCreate:
    """Tests for create_note."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_create_note_success(self, spy_store):
        """Non-empty text is handed to the store as-is."""
        spy_store.create.return_value = NoteRecord(id=1, text="My First Note")

        result = await self.service.create_note(spy_store, "My First Note")

        assert result == NoteRecord(id=1, text="My First Note")
        spy_store.create.assert_awaited_once_with("My First Note")

    @pytest.mark.asyncio
    async def test_create_empty_text_rejected(self, spy_store):
        """Empty text raises ValidationError and nothing is stored."""
        with pytest.raises(ValidationError, match="must not be empty"):
            await self.service.create_note(spy_store, "")

        spy_store.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_whitespace_accepted(self, spy_store):
        """Whitespace-only text is a valid note."""
        spy_store.create.return_value = NoteRecord(id=2, text="   ")

        result = await self.service.create_note(spy_store, "   ")

        assert result.text == "   "


class TestNoteServiceGet:
    """Tests for get_note."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_get_note_found(self, spy_store):
        note = NoteRecord(id=7, text="found me")
        spy_store.get.return_value = StoreResult.found(note)

        assert await self.service.get_note(spy_store, 7) == note
        spy_store.get.assert_awaited_once_with(7)

    @pytest.mark.asyncio
    async def test_get_note_not_found(self, spy_store):
        """Absent id should raise NotFoundError."""
        spy_store.get.return_value = StoreResult.absent()

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_note(spy_store, 7)

        assert exc_info.value.context["resource_id"] == "7"


class TestNoteServiceUpdate:
    """Tests for update_note."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_update_note_found(self, spy_store):
        spy_store.update.return_value = StoreResult.found(NoteRecord(id=3, text="edited"))

        result = await self.service.update_note(spy_store, 3, "edited")

        assert result == NoteRecord(id=3, text="edited")
        spy_store.update.assert_awaited_once_with(3, "edited")

    @pytest.mark.asyncio
    async def test_update_note_not_found(self, spy_store):
        spy_store.update.return_value = StoreResult.absent()

        with pytest.raises(NotFoundError):
            await self.service.update_note(spy_store, 3, "edited")

    @pytest.mark.asyncio
    async def test_update_empty_text_never_reaches_store(self, spy_store):
        """Empty text is rejected before the store can change anything."""
        with pytest.raises(ValidationError):
            await self.service.update_note(spy_store, 3, "")

        spy_store.update.assert_not_awaited()


class TestNoteServiceDelete:
    """Tests for delete_note and delete_all."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_delete_note_message(self, spy_store):
        spy_store.delete.return_value = StoreResult.found(NoteRecord(id=5, text="bye"))

        message = await self.service.delete_note(spy_store, 5)

        assert message == '"Successfully deleted note 5"'

    @pytest.mark.asyncio
    async def test_delete_note_not_found(self, spy_store):
        spy_store.delete.return_value = StoreResult.absent()

        with pytest.raises(NotFoundError):
            await self.service.delete_note(spy_store, 5)

    @pytest.mark.asyncio
    async def test_delete_all(self, spy_store):
        spy_store.delete_all.return_value = 4

        assert await self.service.delete_all(spy_store) == 4
        spy_store.delete_all.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_list_notes_passthrough(self, spy_store):
        notes = [NoteRecord(id=1, text="a"), NoteRecord(id=2, text="b")]
        spy_store.list_notes.return_value = notes

        assert await self.service.list_notes(spy_store) == notes
