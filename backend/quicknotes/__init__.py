"""
QuickNotes Backend — Application Package Initializer
=====================================================

What: Marks the `quicknotes` directory as a Python package.
Who:  Imported by uvicorn (`quicknotes.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │      Routes (API Layer) + UI page   │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (Note Store)        │  ← insert / list / delete-by-id
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The `ui` subpackage is a client of the HTTP API only; it never touches
    the database directly.
"""

__version__ = "1.0.0"
