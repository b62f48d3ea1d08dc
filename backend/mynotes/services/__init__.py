# Services package init
"""
MyNotes Backend — Services Layer
==================================

What:  Business logic and persistence sitting behind the routes.

Service Inventory:
    - NoteStore (abstract): Interface for note persistence, with StoreResult
    - SqlNoteStore: Async SQLAlchemy implementation (SQLite, PostgreSQL)
    - MemoryNoteStore: In-process dict implementation
    - NoteService: Empty-body rule and absence → NotFoundError mapping

Why the store is an interface:
    Routes and NoteService never import a concrete store, so the backend
    is chosen by configuration (NOTE_STORE) and replaced in tests.
"""
