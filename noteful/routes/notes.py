"""
Noteful API — Note Route Handlers
==================================

What:  GET/POST /api/notes and GET/DELETE /api/notes/{note_id}.
How:   Same pipeline shape as the folder routes. The item routes share one
       existence-check stage (`load_note`), so GET and DELETE answer an
       unknown id identically.

Request Flow (POST /api/notes):
    1. parse_json_body    → 400 if the body is not a JSON object
    2. require_fields     → 400 "Missing <field> in request body", checked in
                            the order notename, folderid, content
    3. validate_body      → 400 "Invalid <field> in request body"
    4. insert_note        → store stamps `modified`; 201 + Location
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.exceptions import NotFoundError
from noteful.pipeline import (
    Pipeline,
    PipelineContext,
    PipelineResponse,
    created,
    load_record,
    parse_json_body,
    require_fields,
    run_pipeline,
    validate_body,
)
from noteful.schemas.common import ErrorResponse, UnauthorizedResponse
from noteful.schemas.note import NoteCreate, NoteResponse
from noteful.serializers import serialize_note, serialize_notes
from noteful.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notes", tags=["Notes"])

UNAUTHORIZED = {401: {"description": "Missing or wrong bearer token", "model": UnauthorizedResponse}}
NOTE_MISSING = {404: {"description": "Note does not exist", "model": ErrorResponse}}


# ── Stages ────────────────────────────────────────────────────────────────

async def send_all_notes(ctx: PipelineContext) -> Optional[PipelineResponse]:
    notes = await note_service.list_notes(ctx.db)
    if not notes:
        raise NotFoundError(message="No notes", resource="note")
    return PipelineResponse(status_code=200, body=serialize_notes(notes))


async def insert_note(ctx: PipelineContext) -> Optional[PipelineResponse]:
    note = await note_service.create_note(ctx.db, ctx.state["payload"])
    return created(ctx, note.id, serialize_note(note))


async def send_note(ctx: PipelineContext) -> Optional[PipelineResponse]:
    return PipelineResponse(status_code=200, body=serialize_note(ctx.state["note"]))


async def remove_note(ctx: PipelineContext) -> Optional[PipelineResponse]:
    note = ctx.state["note"]
    if not await note_service.delete_note(ctx.db, note.id):
        raise NotFoundError(message="Note does not exist", resource="note", resource_id=str(note.id))
    return PipelineResponse(status_code=204)


load_note = load_record(
    note_service.get_note,
    param="note_id",
    key="note",
    message="Note does not exist",
)

list_notes_pipeline = Pipeline(send_all_notes, name="list_notes")

create_note_pipeline = Pipeline(
    parse_json_body,
    require_fields("notename", "folderid", "content"),
    validate_body(NoteCreate),
    insert_note,
    name="create_note",
)

get_note_pipeline = Pipeline(load_note, send_note, name="get_note")

delete_note_pipeline = Pipeline(load_note, remove_note, name="delete_note")


# ── Routes ────────────────────────────────────────────────────────────────

@router.get(
    "",
    responses={
        200: {"description": "Every note, escaped", "model": list[NoteResponse]},
        404: {"description": "No notes exist", "model": ErrorResponse},
        **UNAUTHORIZED,
    },
    summary="List notes",
)
async def list_notes(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    return await run_pipeline(list_notes_pipeline, request, db)


@router.post(
    "",
    status_code=201,
    responses={
        201: {"description": "Note created; Location points at it", "model": NoteResponse},
        400: {"description": "Missing or invalid field", "model": ErrorResponse},
        **UNAUTHORIZED,
    },
    summary="Create a note",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": NoteCreate.model_json_schema()}},
        }
    },
)
async def create_note(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """
    Create a note from `{"notename", "folderid", "content"}`.

    `folderid` must name an existing folder; the foreign key is enforced by
    the database, and a violation surfaces as a 500.
    """
    return await run_pipeline(create_note_pipeline, request, db)


@router.get(
    "/{note_id}",
    responses={
        200: {"description": "The note, escaped", "model": NoteResponse},
        **NOTE_MISSING,
        **UNAUTHORIZED,
    },
    summary="Get a note by ID",
)
async def get_note(
    note_id: str,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    return await run_pipeline(get_note_pipeline, request, db)


@router.delete(
    "/{note_id}",
    status_code=204,
    responses={
        204: {"description": "Note deleted"},
        **NOTE_MISSING,
        **UNAUTHORIZED,
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    return await run_pipeline(delete_note_pipeline, request, db)
