"""
Noteful API — Output Serializers
=================================

What:  Turn raw domain records into response-safe JSON-ready dicts.
How:   Untrusted text fields (foldername, notename, content) are HTML-escaped
       with markupsafe: `&`, `<`, `>`, `"` and `'` become entities, so
       injected markup renders as text in a browser. Numeric fields and
       timestamps pass through unchanged.
When:  On every read and every creation response. Never on write: the
       store keeps the values exactly as submitted.

Example:
    'Naughty <script>alert("xss")</script>'
    → 'Naughty &lt;script&gt;alert(&#34;xss&#34;)&lt;/script&gt;'
"""

from typing import Any, Dict, Iterable, List

from markupsafe import escape

from noteful.schemas.folder import FolderRecord, FolderResponse
from noteful.schemas.note import NoteRecord, NoteResponse


def escape_text(value: str) -> str:
    """HTML-escape one untrusted string, returning a plain `str`."""
    return str(escape(value))


def serialize_folder(folder: FolderRecord) -> Dict[str, Any]:
    return FolderResponse(
        id=folder.id,
        foldername=escape_text(folder.foldername),
    ).model_dump(mode="json")


def serialize_note(note: NoteRecord) -> Dict[str, Any]:
    return NoteResponse(
        id=note.id,
        notename=escape_text(note.notename),
        content=escape_text(note.content),
        modified=note.modified,
        folderid=note.folderid,
    ).model_dump(mode="json")


def serialize_folders(folders: Iterable[FolderRecord]) -> List[Dict[str, Any]]:
    return [serialize_folder(folder) for folder in folders]


def serialize_notes(notes: Iterable[NoteRecord]) -> List[Dict[str, Any]]:
    return [serialize_note(note) for note in notes]
