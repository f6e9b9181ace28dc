"""
Noteful API — Bearer Token Middleware (AuthGate)
=================================================

What:  Rejects every request that does not present the configured secret as
       `Authorization: Bearer <token>`.
How:   The secret is handed to the middleware once, when create_app() builds
       the middleware stack from the Settings object. For each request the
       header is split into scheme and token and the token is compared with
       `secrets.compare_digest`.
When:  After request-ID and logging middleware (so rejections are logged with
       a request ID), before any route, dependency or store call.

Rejection:
    HTTP 401, body {"error": "Unauthorized request"}. The response never
    reveals whether the header was missing, malformed or wrong; that reason
    is logged server-side only. The presented token is never logged.
"""

import logging
import secrets
from typing import Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from noteful.exceptions import AuthenticationError
from noteful.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

# Reachable without a token: probes and API documentation
PUBLIC_PATHS = frozenset({"/health", "/docs", "/redoc", "/openapi.json"})


def extract_bearer_token(header: Optional[str]) -> str:
    """
    Return the token from an `Authorization` header value.

    Raises AuthenticationError when the header is absent, has no
    space-delimited scheme and token, or uses a scheme other than Bearer.
    """
    if not header:
        raise AuthenticationError(reason="missing_header")
    scheme, _, token = header.partition(" ")
    if not scheme or not token:
        raise AuthenticationError(reason="malformed_header")
    if scheme.lower() != "bearer":
        raise AuthenticationError(reason="unsupported_scheme", context={"scheme": scheme})
    return token


def check_bearer_token(header: Optional[str], secret: str) -> None:
    """Raise AuthenticationError unless `header` carries exactly `secret`."""
    token = extract_bearer_token(header)
    if not secret:
        raise AuthenticationError(reason="secret_not_configured")
    if not secrets.compare_digest(token.encode("utf-8"), secret.encode("utf-8")):
        raise AuthenticationError(reason="token_mismatch")


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """
    Gate in front of every route except PUBLIC_PATHS.

    Args:
        app:          The wrapped ASGI app
        secret:       The configured API key (immutable for the process)
        public_paths: Paths that skip the check
    """

    def __init__(self, app, secret: str, public_paths: Iterable[str] = PUBLIC_PATHS):
        super().__init__(app)
        self._secret = secret
        self._public_paths = frozenset(public_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self._public_paths:
            return await call_next(request)

        try:
            check_bearer_token(request.headers.get("Authorization"), self._secret)
        except AuthenticationError as exc:
            logger.warning(
                "[%s] Rejected %s %s: %s",
                request_id_var.get(""),
                request.method,
                request.url.path,
                exc.reason,
            )
            return JSONResponse(status_code=exc.status_code, content=exc.to_body())

        return await call_next(request)
