"""
Noteful API — Request ID Middleware
====================================

What:  Assigns a correlation ID to each request and echoes it in `X-Request-ID`.
How:   Reuses a client-supplied `X-Request-ID` or generates a short UUID,
       stores it in a ContextVar for loggers and exception handlers, and in
       `request.state` for route code.
When:  Outermost of the application middleware (after CORS), so every log
       line and error body for the request can carry the ID.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own value
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Sets `request_id_var` and `request.state.request_id` for each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        # Left set after the call: the catch-all error handler runs outside
        # this middleware and still reads it
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
