"""
QuickNotes Backend — Note Store
================================

What:  The three durable operations behind the notes API: insert, list, delete-by-id.
How:   Each method issues a single statement on the session it is given;
       commit/rollback is owned by get_db_session.
Who:   Called by the route handlers in routes/notes.py.

Design Decision:
    NoteStore is stateless — it receives the db session for each call.
    The store assigns identifiers (autoincrement) and is the only source of
    truth; nothing above it caches a note or an id.

Error Handling:
    SQLAlchemy exceptions are logged with their detail and re-raised as
    DatabaseError, whose message is generic. Absence of a record on delete is
    an outcome (DeleteOutcome.NOT_FOUND), not an exception.
"""

import enum
import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quicknotes.exceptions import DatabaseError
from quicknotes.models.note import Note

logger = logging.getLogger(__name__)


class DeleteOutcome(str, enum.Enum):
    REMOVED = "removed"
    NOT_FOUND = "not_found"


class NoteStore:
    """
    Data-access layer for the `notes` table.

    Responsibilities:
        - insert(): persist a new note and return it with its assigned id
        - list_all(): every note, ascending id
        - delete_by_id(): remove one note, reporting whether it existed
    """

    async def insert(self, db: AsyncSession, title: str, content: str) -> Note:
        """
        Add a note and flush so the database assigns its id.

        Raises:
            DatabaseError: Insert failed (→ 500)
        """
        note = Note(title=title, content=content)
        try:
            db.add(note)
            await db.flush()  # Assigns id without committing the transaction
        except SQLAlchemyError as e:
            logger.error("Database error inserting note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to create note",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Note created: id=%s", note.id)
        return note

    async def list_all(self, db: AsyncSession) -> List[Note]:
        """
        Return every note.

        Order is ascending id. Clients are not promised any order; this just
        keeps the output deterministic.

        Raises:
            DatabaseError: Query failed (→ 500)
        """
        try:
            result = await db.execute(select(Note).order_by(Note.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch notes",
                context={"error_type": type(e).__name__},
            ) from e

    async def delete_by_id(self, db: AsyncSession, note_id: int) -> DeleteOutcome:
        """
        Delete the note with `note_id`.

        Query plan:
            DELETE FROM notes WHERE id = :id
            → primary key lookup; rowcount is 0 or 1

        Returns:
            DeleteOutcome.REMOVED if a row matched, DeleteOutcome.NOT_FOUND otherwise

        Raises:
            DatabaseError: Statement failed (→ 500)
        """
        try:
            result = await db.execute(delete(Note).where(Note.id == note_id))
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to delete note",
                context={"note_id": note_id, "error_type": type(e).__name__},
            ) from e

        if result.rowcount == 0:
            logger.info("Delete requested for missing note: id=%s", note_id)
            return DeleteOutcome.NOT_FOUND

        logger.info("Note deleted: id=%s", note_id)
        return DeleteOutcome.REMOVED


# ── Singleton Instance ────────────────────────────────────────────────────
note_store = NoteStore()
