"""
Noteful API — Folder Route Handlers
====================================

What:  GET /api/folders, POST /api/folders, GET /api/folders/{folder_id}.
How:   Each route runs a Pipeline of stages; the handlers below only adapt
       the Starlette request and the database session to the pipeline.

Folders cannot be updated or deleted through the API.
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
from noteful.schemas.folder import FolderCreate, FolderResponse
from noteful.serializers import serialize_folder, serialize_folders
from noteful.services.folder_service import folder_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/folders", tags=["Folders"])

UNAUTHORIZED = {401: {"description": "Missing or wrong bearer token", "model": UnauthorizedResponse}}


# ── Stages ────────────────────────────────────────────────────────────────

async def send_all_folders(ctx: PipelineContext) -> Optional[PipelineResponse]:
    folders = await folder_service.list_folders(ctx.db)
    if not folders:
        raise NotFoundError(message="No folders", resource="folder")
    return PipelineResponse(status_code=200, body=serialize_folders(folders))


async def insert_folder(ctx: PipelineContext) -> Optional[PipelineResponse]:
    folder = await folder_service.create_folder(ctx.db, ctx.state["payload"])
    return created(ctx, folder.id, serialize_folder(folder))


async def send_folder(ctx: PipelineContext) -> Optional[PipelineResponse]:
    return PipelineResponse(status_code=200, body=serialize_folder(ctx.state["folder"]))


load_folder = load_record(
    folder_service.get_folder,
    param="folder_id",
    key="folder",
    message="Folder does not exist",
)

list_folders_pipeline = Pipeline(send_all_folders, name="list_folders")

create_folder_pipeline = Pipeline(
    parse_json_body,
    require_fields("foldername"),
    validate_body(FolderCreate),
    insert_folder,
    name="create_folder",
)

get_folder_pipeline = Pipeline(load_folder, send_folder, name="get_folder")


# ── Routes ────────────────────────────────────────────────────────────────

@router.get(
    "",
    responses={
        200: {"description": "Every folder, escaped", "model": list[FolderResponse]},
        404: {"description": "No folders exist", "model": ErrorResponse},
        **UNAUTHORIZED,
    },
    summary="List folders",
)
async def list_folders(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    return await run_pipeline(list_folders_pipeline, request, db)


@router.post(
    "",
    status_code=201,
    responses={
        201: {"description": "Folder created; Location points at it", "model": FolderResponse},
        400: {"description": "Missing or invalid foldername", "model": ErrorResponse},
        **UNAUTHORIZED,
    },
    summary="Create a folder",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": FolderCreate.model_json_schema()}},
        }
    },
)
async def create_folder(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """
    Create a folder from `{"foldername": ...}`.

    The name is stored exactly as sent; the response body carries the
    escaped form.
    """
    return await run_pipeline(create_folder_pipeline, request, db)


@router.get(
    "/{folder_id}",
    responses={
        200: {"description": "The folder, escaped", "model": FolderResponse},
        404: {"description": "Folder does not exist", "model": ErrorResponse},
        **UNAUTHORIZED,
    },
    summary="Get a folder by ID",
)
async def get_folder(
    folder_id: str,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    # folder_id is declared as str so non-numeric ids reach the existence
    # check and get the same 404 as unknown ones
    return await run_pipeline(get_folder_pipeline, request, db)
