"""
Noteful API — Folder SQLAlchemy Model
======================================

What:  ORM model representing the `noteful_folders` table.
Who:   Used by ResourceStore for folder queries and by Alembic for migrations.

Table Design:
    - Integer identity primary key assigned by the database; ids are never reused.
    - foldername: TEXT, stored raw. Escaping happens only on the way out
      (see noteful.serializers).
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Folder(Base):
    """A named container for notes. Created and read; never updated or deleted."""

    __tablename__ = "noteful_folders"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier",
    )

    foldername: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Folder display name (untrusted, stored unescaped)",
    )

    # SQLite otherwise hands the id of a deleted highest row to the next insert
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, foldername={self.foldername!r})>"
