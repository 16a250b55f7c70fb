"""
QuickNotes Backend — Note SQLAlchemy Model
============================================

What:  ORM model representing the `notes` table.
Who:   Used by NoteStore for insert/list/delete and by Alembic for schema management.

Table Design:
    - Integer autoincrement primary key: assigned by the database on insert,
      never computed by the API, immutable afterwards
    - title: short text, VARCHAR(255)
    - content: unbounded TEXT
    - No uniqueness constraint on title/content; identical notes are distinct rows
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from quicknotes.database import Base

TITLE_MAX_LENGTH = 255


class Note(Base):
    """
    A persisted note.

    Lifecycle:
        1. Inserted by POST /api/notes (database assigns `id`)
        2. Never updated in place
        3. Deleted by DELETE /api/notes/{id}
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Database-assigned identifier",
    )

    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
        comment="Note title",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note body text",
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
