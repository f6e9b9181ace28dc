"""
Noteful API — Note SQLAlchemy Model
====================================

What:  ORM model representing the `noteful_notes` table.
Who:   Used by ResourceStore for note queries and by Alembic for migrations.

Table Design Rationale:
    - Integer identity primary key assigned by the database; ids are never
      reused (AUTOINCREMENT on SQLite, SERIAL on PostgreSQL).
    - notename / content: TEXT, stored raw (escaped only in responses).
    - folderid: foreign key to noteful_folders.id. Referential behaviour is the
      database default; no cascade is declared.
    - modified: UTC timestamp stamped on insert and refreshed on every update.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A note stored inside a folder.

    Lifecycle:
        1. Created by POST /api/notes; the store assigns `id` and `modified`
        2. Read via list or get-by-id
        3. Deleted by DELETE /api/notes/{id}
    """

    __tablename__ = "noteful_notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier",
    )

    notename: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note title (untrusted, stored unescaped)",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note body (untrusted, stored unescaped)",
    )

    folderid: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("noteful_folders.id"),
        nullable=False,
        comment="Owning folder",
    )

    # Always UTC with timezone; conversion to local time happens in clients
    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="Last write time (UTC)",
    )

    __table_args__ = (
        Index("idx_noteful_notes_folderid", "folderid"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, folderid={self.folderid}, "
            f"modified='{self.modified}')>"
        )
