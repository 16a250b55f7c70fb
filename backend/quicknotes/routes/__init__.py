# Routes package init
"""
QuickNotes Backend — Routes Package
=====================================

Route Inventory:
    - notes.py:   GET    /api/notes          (list all notes)
                  POST   /api/notes          (create a note)
                  DELETE /api/notes/{id}     (delete a note)
    - health.py:  GET    /health             (service health check)
    - quicknotes.ui.page: GET /              (the notes page)

Routes stay thin: parse the request, call the note store, shape the response.
"""
