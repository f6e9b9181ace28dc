"""
Noteful API — Note Schemas
===========================

What:  Pydantic models defining the note API contract.
How:   The pipeline validates POST bodies against NoteCreate once the
       required-field stage has passed, NoteService builds NoteRecord from
       ORM rows, and the serializer emits NoteResponse.

Design Decision:
    Raw and escaped shapes are separate types so a raw record cannot be
    returned to a client by accident: routes only ever emit NoteResponse.
"""

from datetime import datetime

from pydantic import BaseModel, Field, StrictInt, StrictStr

from noteful.schemas.common import MAX_RECORD_ID


class NoteCreate(BaseModel):
    """
    What:  POST /api/notes body after presence checks.
    Why:   Rejects wrongly typed values before the insert reaches the store.
           Strict types: "1", 1.0 and true are not folder ids, and ids
           outside the INTEGER column range cannot exist.
    """
    notename: StrictStr = Field(description="Note title")
    folderid: StrictInt = Field(gt=0, le=MAX_RECORD_ID, description="Identifier of the owning folder")
    content: StrictStr = Field(description="Note body")


class NoteRecord(BaseModel):
    """
    What:  A note as stored. Text fields are raw and untrusted.
    Who:   Returned by NoteService; consumed by the serializer.
    """
    id: int
    notename: str
    content: str
    folderid: int
    modified: datetime

    model_config = {"from_attributes": True, "frozen": True}


class NoteResponse(BaseModel):
    """
    What:  Response-safe note.
    Who:   GET /api/notes, GET /api/notes/{id}, POST /api/notes.

    Fields:
        notename, content: HTML-escaped
        id, folderid, modified: passed through unchanged
    """
    id: int = Field(description="Store-assigned identifier")
    notename: str = Field(description="HTML-escaped note title")
    content: str = Field(description="HTML-escaped note body")
    modified: datetime = Field(description="Last write time (ISO 8601)")
    folderid: int = Field(description="Identifier of the owning folder")
