"""
Noteful API — Folder Service
=============================

What:  Adapter between ResourceStore rows and FolderRecord domain records.
Who:   Called by the folder pipeline stages in routes/folders.py.

The service is stateless; it receives the session on every call and holds
only a reference to the store, which tests replace with a mock.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from noteful.schemas.folder import FolderCreate, FolderRecord
from noteful.store import ResourceStore, resource_store

logger = logging.getLogger(__name__)


class FolderService:
    """
    Folder operations exposed to the pipeline.

    Responsibilities:
        - list_folders(): every folder, in id order
        - get_folder():   one folder or None
        - create_folder(): insert and return the stored record
    """

    def __init__(self, store: ResourceStore = resource_store):
        self.store = store

    async def list_folders(self, db: AsyncSession) -> List[FolderRecord]:
        rows = await self.store.get_all_folders(db)
        return [FolderRecord.model_validate(row) for row in rows]

    async def get_folder(self, db: AsyncSession, folder_id: int) -> Optional[FolderRecord]:
        row = await self.store.get_folder_by_id(db, folder_id)
        if row is None:
            return None
        return FolderRecord.model_validate(row)

    async def create_folder(self, db: AsyncSession, data: FolderCreate) -> FolderRecord:
        row = await self.store.insert_folder(db, data.model_dump())
        return FolderRecord.model_validate(row)


folder_service = FolderService()
