"""
Noteful API — Note Service Unit Tests
======================================

What:  Tests for NoteService (list, get, create, delete).
How:   Uses a mock store and a mock DB session (no real database).

What we test:
    ✅ Rows are converted into NoteRecord
    ✅ A missing row comes back as None, not an exception
    ✅ create_note forwards only the validated fields to the store
    ✅ delete_note reports whether a row was removed
    ✅ Store errors are not swallowed
"""

import pytest
from datetime import datetime, timezone
from types import SimpleNamespace

from sqlalchemy.exc import OperationalError

from noteful.schemas.note import NoteCreate, NoteRecord
from noteful.services.note_service import NoteService

MODIFIED = datetime(2029, 1, 22, 16, 28, 32, tzinfo=timezone.utc)


def note_row(note_id=1, notename="Dogs", content="Woof", folderid=1):
    return SimpleNamespace(
        id=note_id, notename=notename, content=content, folderid=folderid, modified=MODIFIED
    )


class TestNoteServiceRead:

    @pytest.mark.asyncio
    async def test_list_notes(self, mock_store, mock_db_session):
        mock_store.get_all_notes.return_value = [note_row(1), note_row(2, "Cats")]
        service = NoteService(store=mock_store)

        notes = await service.list_notes(mock_db_session)

        assert [n.id for n in notes] == [1, 2]
        assert all(isinstance(n, NoteRecord) for n in notes)
        mock_store.get_all_notes.assert_awaited_once_with(mock_db_session)

    @pytest.mark.asyncio
    async def test_list_notes_empty(self, mock_store, mock_db_session):
        mock_store.get_all_notes.return_value = []
        assert await NoteService(store=mock_store).list_notes(mock_db_session) == []

    @pytest.mark.asyncio
    async def test_get_note(self, mock_store, mock_db_session):
        mock_store.get_note_by_id.return_value = note_row(7, "<b>raw</b>")

        note = await NoteService(store=mock_store).get_note(mock_db_session, 7)

        # Services hand back raw text; escaping happens in the serializer
        assert note.notename == "<b>raw</b>"
        assert note.modified == MODIFIED
        mock_store.get_note_by_id.assert_awaited_once_with(mock_db_session, 7)

    @pytest.mark.asyncio
    async def test_get_missing_note_returns_none(self, mock_store, mock_db_session):
        mock_store.get_note_by_id.return_value = None
        assert await NoteService(store=mock_store).get_note(mock_db_session, 99) is None


class TestNoteServiceWrite:

    @pytest.mark.asyncio
    async def test_create_note(self, mock_store, mock_db_session):
        mock_store.insert_note.return_value = note_row(5, "New", "Body", 2)
        data = NoteCreate(notename="New", folderid=2, content="Body")

        note = await NoteService(store=mock_store).create_note(mock_db_session, data)

        assert note.id == 5
        mock_store.insert_note.assert_awaited_once_with(
            mock_db_session, {"notename": "New", "folderid": 2, "content": "Body"}
        )

    @pytest.mark.asyncio
    async def test_delete_note_removed(self, mock_store, mock_db_session):
        mock_store.delete_note.return_value = 1
        assert await NoteService(store=mock_store).delete_note(mock_db_session, 3) is True
        mock_store.delete_note.assert_awaited_once_with(mock_db_session, 3)

    @pytest.mark.asyncio
    async def test_delete_note_nothing_removed(self, mock_store, mock_db_session, caplog):
        mock_store.delete_note.return_value = 0

        with caplog.at_level("WARNING", logger="noteful.services.note_service"):
            removed = await NoteService(store=mock_store).delete_note(mock_db_session, 3)

        assert removed is False
        assert "removed no rows" in caplog.text

    @pytest.mark.asyncio
    async def test_store_error_propagates(self, mock_store, mock_db_session):
        mock_store.insert_note.side_effect = OperationalError("INSERT", {}, Exception("db down"))
        data = NoteCreate(notename="New", folderid=2, content="Body")

        with pytest.raises(OperationalError):
            await NoteService(store=mock_store).create_note(mock_db_session, data)
