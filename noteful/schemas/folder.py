"""
Noteful API — Folder Schemas
=============================

What:  Pydantic models for folders at each edge of the pipeline.
    - FolderCreate:   validated POST body (after the missing-field check)
    - FolderRecord:   raw domain record produced by FolderService from a row
    - FolderResponse: escaped representation produced by the serializer
"""

from pydantic import BaseModel, Field, StrictStr


class FolderCreate(BaseModel):
    foldername: StrictStr = Field(description="Folder display name")


class FolderRecord(BaseModel):
    """
    What:  A folder as stored, with untrusted text left raw.
    Who:   Returned by FolderService; never sent to clients directly.
    """
    id: int = Field(description="Store-assigned identifier")
    foldername: str = Field(description="Raw folder name")

    model_config = {"from_attributes": True, "frozen": True}


class FolderResponse(BaseModel):
    """
    What:  Response-safe folder. `foldername` is HTML-escaped.
    Who:   Returned by every folder route that has a body.
    """
    id: int = Field(description="Store-assigned identifier")
    foldername: str = Field(description="HTML-escaped folder name")
