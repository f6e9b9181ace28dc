"""GET /: authenticated smoke-test endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def hello() -> str:
    return "Hello, world!"
