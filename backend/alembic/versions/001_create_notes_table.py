"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the `notes` table: an auto-incrementing id and the note text.
Why:   Ids must never be handed out twice, so SQLite gets AUTOINCREMENT and
       PostgreSQL a BIGSERIAL sequence.

Rollback: downgrade() drops the table (all notes are lost).
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
    """Create the notes table. Column docs live in mynotes/models/note.py."""
    op.create_table(
        "notes",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            autoincrement=True,
            nullable=False,
            comment="Store-assigned identifier, never reused",
        ),
        sa.Column(
            "note",
            sa.Text(),
            nullable=False,
            comment="Note body, stored verbatim",
        ),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("notes")
