# Services package init
"""
QuickNotes Backend — Services Layer
=====================================

What:  Data-access layer sitting between routes (HTTP) and the database.

Service Inventory:
    - NoteStore: insert / list_all / delete_by_id over the `notes` table

Routes never build SQL themselves; they call the store and translate its
results (and its DatabaseError) into HTTP responses.
"""
