# Schemas package init
"""
MyNotes Backend — API Schemas
===============================

Schema Inventory:
    - note.py: NoteResponse, ErrorResponse, HealthResponse
"""
