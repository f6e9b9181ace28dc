"""
Noteful API — Folder Service Unit Tests
========================================

What:  Tests for FolderService against a mock store.
"""

import pytest
from types import SimpleNamespace

from noteful.schemas.folder import FolderCreate, FolderRecord
from noteful.services.folder_service import FolderService


class TestFolderService:

    def setup_method(self):
        self.rows = [SimpleNamespace(id=1, foldername="Important"), SimpleNamespace(id=2, foldername="Super")]

    @pytest.mark.asyncio
    async def test_list_folders(self, mock_store, mock_db_session):
        mock_store.get_all_folders.return_value = self.rows

        folders = await FolderService(store=mock_store).list_folders(mock_db_session)

        assert folders == [FolderRecord(id=1, foldername="Important"), FolderRecord(id=2, foldername="Super")]

    @pytest.mark.asyncio
    async def test_get_folder(self, mock_store, mock_db_session):
        mock_store.get_folder_by_id.return_value = self.rows[1]

        folder = await FolderService(store=mock_store).get_folder(mock_db_session, 2)

        assert folder.foldername == "Super"
        mock_store.get_folder_by_id.assert_awaited_once_with(mock_db_session, 2)

    @pytest.mark.asyncio
    async def test_get_missing_folder_returns_none(self, mock_store, mock_db_session):
        mock_store.get_folder_by_id.return_value = None
        assert await FolderService(store=mock_store).get_folder(mock_db_session, 9) is None

    @pytest.mark.asyncio
    async def test_create_folder(self, mock_store, mock_db_session):
        mock_store.insert_folder.return_value = SimpleNamespace(id=4, foldername="New")

        folder = await FolderService(store=mock_store).create_folder(
            mock_db_session, FolderCreate(foldername="New")
        )

        assert folder == FolderRecord(id=4, foldername="New")
        mock_store.insert_folder.assert_awaited_once_with(mock_db_session, {"foldername": "New"})
