"""
Noteful API — Resource Store
=============================

What:  Table accessor for folders and notes: get-all, get-by-id, insert, delete.
How:   Thin async SQLAlchemy queries over the session passed in by the caller.
       Writes commit immediately and refresh the row so the returned object
       carries the store-assigned `id` and `modified` exactly as a later read
       would see them.
Who:   FolderService and NoteService.

Error Handling:
    Nothing is caught here. Driver or constraint errors (e.g. a folderid that
    violates the foreign key) propagate to the global handler, which answers
    with a generic 500.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.models import Folder, Note

logger = logging.getLogger(__name__)


class ResourceStore:
    """Single-row CRUD primitives for the folder and note tables."""

    # ── Folders ───────────────────────────────────────────────────────────

    async def get_all_folders(self, db: AsyncSession) -> Sequence[Folder]:
        result = await db.execute(select(Folder).order_by(Folder.id))
        return result.scalars().all()

    async def get_folder_by_id(self, db: AsyncSession, folder_id: int) -> Optional[Folder]:
        return await db.get(Folder, folder_id)

    async def insert_folder(self, db: AsyncSession, record: Mapping[str, Any]) -> Folder:
        folder = Folder(**record)
        db.add(folder)
        await db.commit()
        await db.refresh(folder)
        logger.info("Folder %s inserted", folder.id)
        return folder

    # ── Notes ─────────────────────────────────────────────────────────────

    async def get_all_notes(self, db: AsyncSession) -> Sequence[Note]:
        result = await db.execute(select(Note).order_by(Note.id))
        return result.scalars().all()

    async def get_note_by_id(self, db: AsyncSession, note_id: int) -> Optional[Note]:
        return await db.get(Note, note_id)

    async def insert_note(self, db: AsyncSession, record: Mapping[str, Any]) -> Note:
        note = Note(**record)
        db.add(note)
        await db.commit()
        await db.refresh(note)
        logger.info("Note %s inserted into folder %s", note.id, note.folderid)
        return note

    async def delete_note(self, db: AsyncSession, note_id: int) -> int:
        """Delete one note. Returns the number of rows removed (0 or 1)."""
        result = await db.execute(delete(Note).where(Note.id == note_id))
        await db.commit()
        logger.info("Note %s deleted (%d row)", note_id, result.rowcount)
        return result.rowcount


resource_store = ResourceStore()
