# Models package init
"""
MyNotes Backend — ORM Models
==============================

Model Inventory:
    - note.py: Note (the `notes` table)
"""
