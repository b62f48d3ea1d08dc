# Routes package init
"""
MyNotes Backend — API Routes Package
======================================

Route Inventory:
    - notes.py:   GET    /notes               (list all notes)
                  GET    /notes/{id}          (get one note)
                  POST   /notes               (create from plain-text body)
                  PUT    /notes/{id}          (replace text)
                  DELETE /notes/deleteAll     (clear the store)
                  DELETE /notes/{id}          (delete one note)
    - health.py:  GET    /health              (service health check)

Design Principle:
    Routes are THIN: they parse the request, call NoteService, and
    format the response. Business rules live in services/note_service.py.
"""
