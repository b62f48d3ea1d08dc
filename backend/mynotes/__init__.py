"""
MyNotes Backend — Application Package Initializer
==================================================

What: Marks the `mynotes` directory as a Python package.
Why:  Enables module imports like `from mynotes.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      NoteService (Handler Logic)    │  ← empty-body rule, absence → 404
    ├─────────────────────────────────────┤
    │          NoteStore (Interface)      │  ← list/create/get/update/delete/clear
    ├──────────────────┬──────────────────┤
    │  SqlNoteStore    │  MemoryNoteStore │  ← swappable adapters
    └──────────────────┴──────────────────┘

    Routes never talk to a store directly, and stores never know about HTTP.
"""

__version__ = "1.0.0"
