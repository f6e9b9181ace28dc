"""Create folders and notes tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates `noteful_folders` and `noteful_notes`.
How:   Integer identity keys; notes reference folders through `folderid`
       with the database's default referential behaviour.

Rollback: downgrade() drops both tables; all data is lost.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "noteful_folders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False,
                  comment="Store-assigned identifier"),
        sa.Column("foldername", sa.Text(), nullable=False,
                  comment="Folder display name (untrusted, stored unescaped)"),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "noteful_notes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False,
                  comment="Store-assigned identifier"),
        sa.Column("notename", sa.Text(), nullable=False,
                  comment="Note title (untrusted, stored unescaped)"),
        sa.Column("content", sa.Text(), nullable=False,
                  comment="Note body (untrusted, stored unescaped)"),
        sa.Column("folderid", sa.Integer(), nullable=False, comment="Owning folder"),
        sa.Column(
            "modified",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="Last write time (UTC)",
        ),
        sa.ForeignKeyConstraint(["folderid"], ["noteful_folders.id"]),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )

    # Lookups of a folder's notes
    op.create_index("idx_noteful_notes_folderid", "noteful_notes", ["folderid"])


def downgrade() -> None:
    """Drop both tables. Notes first: they reference folders."""
    op.drop_index("idx_noteful_notes_folderid", table_name="noteful_notes")
    op.drop_table("noteful_notes")
    op.drop_table("noteful_folders")
