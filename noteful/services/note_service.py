"""
Noteful API — Note Service
===========================

What:  Adapter between ResourceStore rows and NoteRecord domain records.
How:   Each method performs exactly one store call and converts the result.
       Missing rows come back as None / False; deciding what that means for
       the HTTP response is left to the pipeline's existence-check stage.
Who:   Called by the note pipeline stages in routes/notes.py.

Error Handling Strategy:
    Store errors are not wrapped. They reach the global handler unchanged,
    which logs them and answers with a generic 500.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from noteful.schemas.note import NoteCreate, NoteRecord
from noteful.store import ResourceStore, resource_store

logger = logging.getLogger(__name__)


class NoteService:
    """
    Note operations exposed to the pipeline.

    Responsibilities:
        - list_notes():  every note, in id order
        - get_note():    one note or None
        - create_note(): insert; the store stamps `modified`
        - delete_note(): remove one note, reporting whether a row went away
    """

    def __init__(self, store: ResourceStore = resource_store):
        self.store = store

    async def list_notes(self, db: AsyncSession) -> List[NoteRecord]:
        rows = await self.store.get_all_notes(db)
        return [NoteRecord.model_validate(row) for row in rows]

    async def get_note(self, db: AsyncSession, note_id: int) -> Optional[NoteRecord]:
        row = await self.store.get_note_by_id(db, note_id)
        if row is None:
            return None
        return NoteRecord.model_validate(row)

    async def create_note(self, db: AsyncSession, data: NoteCreate) -> NoteRecord:
        row = await self.store.insert_note(db, data.model_dump())
        return NoteRecord.model_validate(row)

    async def delete_note(self, db: AsyncSession, note_id: int) -> bool:
        removed = await self.store.delete_note(db, note_id)
        if not removed:
            # Row vanished between the existence check and the delete
            logger.warning("Delete of note %s removed no rows", note_id)
        return bool(removed)


note_service = NoteService()
