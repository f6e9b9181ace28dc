"""
Noteful API — Serializer Tests
===============================

What:  HTML escaping of untrusted text fields on the way out.
"""

from datetime import datetime, timezone

import pytest

from noteful.schemas.folder import FolderRecord
from noteful.schemas.note import NoteRecord
from noteful.serializers import (
    escape_text,
    serialize_folder,
    serialize_folders,
    serialize_note,
    serialize_notes,
)


class TestEscapeText:

    @pytest.mark.parametrize(
        "raw,escaped",
        [
            ("<script>", "&lt;script&gt;"),
            ("Tom & Jerry", "Tom &amp; Jerry"),
            ('say "hi"', "say &#34;hi&#34;"),
            ("it's", "it&#39;s"),
            ("plain text", "plain text"),
            ("", ""),
        ],
    )
    def test_escapes_markup(self, raw, escaped):
        assert escape_text(raw) == escaped

    def test_returns_plain_str(self):
        assert type(escape_text("<b>")) is str


class TestSerializeRecords:

    def test_folder(self):
        folder = FolderRecord(id=911, foldername='<script>alert("xss");</script>')
        assert serialize_folder(folder) == {
            "id": 911,
            "foldername": "&lt;script&gt;alert(&#34;xss&#34;);&lt;/script&gt;",
        }

    def test_note_escapes_text_only(self):
        modified = datetime(2029, 1, 22, 16, 28, 32, 615000, tzinfo=timezone.utc)
        note = NoteRecord(id=3, notename="<i>n</i>", content="a < b", folderid=2, modified=modified)

        body = serialize_note(note)

        assert body == {
            "id": 3,
            "notename": "&lt;i&gt;n&lt;/i&gt;",
            "content": "a &lt; b",
            "modified": "2029-01-22T16:28:32.615000Z",
            "folderid": 2,
        }

    def test_record_is_not_mutated(self):
        folder = FolderRecord(id=1, foldername="<b>")
        serialize_folder(folder)
        assert folder.foldername == "<b>"

    def test_lists(self):
        folders = [FolderRecord(id=i, foldername=f"<{i}>") for i in (1, 2)]
        assert [f["foldername"] for f in serialize_folders(folders)] == ["&lt;1&gt;", "&lt;2&gt;"]
        assert serialize_notes([]) == []
