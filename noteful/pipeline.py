"""
Noteful API — Request Pipeline
===============================

What:  A small runner for ordered request stages, plus the stages shared by
       the folder and note routers.
How:   Route handlers translate the Starlette request into a typed
       PipelineRequest, wrap it in a PipelineContext together with the
       database session, and hand it to a Pipeline. Each stage either returns
       None (continue, usually after depositing something in `ctx.state`) or
       a PipelineResponse (stop here and send this).

       Stages may also raise ValidationError / NotFoundError; the runner
       converts those into the matching structured response. Every other
       exception escapes the runner untouched and is rendered as a 500 by the
       global handler in main.py.

Stage order for a typical create route:
    parse_json_body → require_fields(...) → validate_body(Model) → insert handler

Stage order for an item route:
    load_record(...)  (existence check) → item handler
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from noteful.exceptions import NotefulError, NotFoundError, ValidationError
from noteful.schemas.common import MAX_RECORD_ID

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Typed request / response / context
# ══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class PipelineRequest:
    """The parts of an HTTP request the stages are allowed to look at."""

    method: str
    path: str
    path_params: Dict[str, str] = field(default_factory=dict)
    query_params: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @classmethod
    async def from_starlette(cls, request: Request) -> "PipelineRequest":
        return cls(
            method=request.method,
            path=request.url.path,
            path_params={k: str(v) for k, v in request.path_params.items()},
            query_params=dict(request.query_params),
            body=await request.body(),
        )


@dataclass
class PipelineResponse:
    """Status, headers and a JSON-ready body. `body=None` means an empty body."""

    status_code: int
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)

    def to_starlette(self) -> Response:
        if self.body is None:
            return Response(status_code=self.status_code, headers=self.headers)
        return JSONResponse(
            content=self.body,
            status_code=self.status_code,
            headers=self.headers,
        )


@dataclass
class PipelineContext:
    request: PipelineRequest
    db: AsyncSession
    state: Dict[str, Any] = field(default_factory=dict)


Stage = Callable[[PipelineContext], Awaitable[Optional[PipelineResponse]]]


# ══════════════════════════════════════════════════════════════════════════
# Runner
# ══════════════════════════════════════════════════════════════════════════

def error_response(exc: NotefulError) -> PipelineResponse:
    return PipelineResponse(status_code=exc.status_code, body=exc.to_body())


class Pipeline:
    """
    An ordered list of stages.

    `run()` returns the first response any stage produces. A pipeline whose
    stages all continue is a programming error and raises RuntimeError.
    """

    def __init__(self, *stages: Stage, name: str = "pipeline"):
        if not stages:
            raise ValueError("A pipeline needs at least one stage")
        self.stages = stages
        self.name = name

    async def run(self, ctx: PipelineContext) -> PipelineResponse:
        for stage in self.stages:
            try:
                response = await stage(ctx)
            except NotefulError as exc:
                logger.info(
                    "%s short-circuited at %s: %d %s | Context: %s",
                    self.name,
                    getattr(stage, "__name__", repr(stage)),
                    exc.status_code,
                    exc.message,
                    exc.context,
                )
                return error_response(exc)
            if response is not None:
                return response
        raise RuntimeError(f"Pipeline '{self.name}' finished without producing a response")

    def __repr__(self) -> str:
        names = ", ".join(getattr(s, "__name__", repr(s)) for s in self.stages)
        return f"<Pipeline {self.name}: {names}>"


async def run_pipeline(pipeline: Pipeline, request: Request, db: AsyncSession) -> Response:
    """Run `pipeline` for a Starlette request and return a Starlette response."""
    ctx = PipelineContext(request=await PipelineRequest.from_starlette(request), db=db)
    result = await pipeline.run(ctx)
    return result.to_starlette()


# ══════════════════════════════════════════════════════════════════════════
# Shared stages
# ══════════════════════════════════════════════════════════════════════════

async def parse_json_body(ctx: PipelineContext) -> Optional[PipelineResponse]:
    """Decode the body into `ctx.state["body"]`. An empty body counts as `{}`."""
    raw = ctx.request.body
    if not raw.strip():
        ctx.state["body"] = {}
        return None
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ValidationError(
            message="Request body must be valid JSON",
            context={"error": str(exc)},
        )
    if not isinstance(data, dict):
        raise ValidationError(message="Request body must be a JSON object")
    ctx.state["body"] = data
    return None


def require_fields(*names: str) -> Stage:
    """
    Build a stage that rejects the body when a field is absent or null.

    Fields are checked in the given order and only the first missing one is
    reported.
    """

    async def require_fields_stage(ctx: PipelineContext) -> Optional[PipelineResponse]:
        body = ctx.state.get("body", {})
        for name in names:
            if body.get(name) is None:
                raise ValidationError(message=f"Missing {name} in request body", field=name)
        return None

    return require_fields_stage


def validate_body(model: Type[BaseModel]) -> Stage:
    """Build a stage that parses the known fields into `ctx.state["payload"]`."""

    async def validate_body_stage(ctx: PipelineContext) -> Optional[PipelineResponse]:
        body = ctx.state.get("body", {})
        known = {name: body[name] for name in model.model_fields if name in body}
        try:
            ctx.state["payload"] = model.model_validate(known)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            name = str(first["loc"][0]) if first.get("loc") else "field"
            raise ValidationError(
                message=f"Invalid {name} in request body",
                field=name,
                context={"detail": first.get("msg")},
            )
        return None

    return validate_body_stage


def load_record(
    loader: Callable[[AsyncSession, int], Awaitable[Any]],
    *,
    param: str,
    key: str,
    message: str,
) -> Stage:
    """
    Build the existence-check stage for an item route.

    Resolves `ctx.request.path_params[param]` through `loader` and stores the
    record in `ctx.state[key]`. Ids that are not positive integers in the
    column range cannot exist, so they are answered the same way as an
    unknown id, without a store round trip.
    """

    async def load_record_stage(ctx: PipelineContext) -> Optional[PipelineResponse]:
        raw_id = ctx.request.path_params.get(param, "")
        try:
            record_id = int(raw_id)
        except ValueError:
            record_id = None
        if record_id is None or not 0 < record_id <= MAX_RECORD_ID:
            raise NotFoundError(message=message, resource=key, resource_id=raw_id)

        record = await loader(ctx.db, record_id)
        if record is None:
            raise NotFoundError(message=message, resource=key, resource_id=raw_id)
        ctx.state[key] = record
        return None

    return load_record_stage


def created(ctx: PipelineContext, record_id: int, body: Any) -> PipelineResponse:
    """201 response with a Location header of `<collection-path>/<id>`."""
    location = f"{ctx.request.path.rstrip('/')}/{record_id}"
    return PipelineResponse(status_code=201, body=body, headers={"Location": location})
