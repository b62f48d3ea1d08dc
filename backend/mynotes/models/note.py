"""
MyNotes Backend — Note SQLAlchemy Model
=========================================

What:  ORM model representing the `notes` table.
Why:   Maps Python objects to database rows for the SQL note store.
Who:   Used by SqlNoteStore for CRUD operations and by Alembic for schema management.

Table Design Rationale:
    - Integer primary key: ids are small, sequential and part of the URL
    - sqlite_autoincrement: SQLite would otherwise hand a deleted max id
      out again; AUTOINCREMENT keeps ids unique for the table's lifetime
      (PostgreSQL sequences already behave this way)
    - note: TEXT, stored verbatim with no length limit
"""

from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from mynotes.database import Base


class Note(Base):
    """
    A single note row.

    The column is named `note` (the record field is `text`); SqlNoteStore
    translates between the two.
    """

    __tablename__ = "notes"

    # BigInteger on server databases, plain INTEGER on SQLite so that the
    # column is a rowid alias and AUTOINCREMENT is allowed
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier, never reused",
    )

    text: Mapped[str] = mapped_column(
        "note",
        Text,
        nullable=False,
        comment="Note body, stored verbatim",
    )

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Note(id={self.id}, length={len(self.text or '')})>"
