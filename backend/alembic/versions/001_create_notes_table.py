"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `notes` table: integer autoincrement id, title, content.

Rollback: downgrade() drops the table entirely (destructive — all notes lost).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the notes table. Column docs live in quicknotes/models/note.py."""
    op.create_table(
        "notes",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Database-assigned identifier",
        ),
        sa.Column(
            "title",
            sa.String(255),
            nullable=False,
            comment="Note title",
        ),
        sa.Column(
            "content",
            sa.Text(),
            nullable=False,
            comment="Note body text",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("notes")
