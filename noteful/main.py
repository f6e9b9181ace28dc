"""
Noteful API — FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app(settings) builds the database engine and session factory,
       the middleware chain (with the bearer secret passed in explicitly),
       the exception handlers and the routers, all from one frozen Settings
       object, and keeps the shared handles on `app.state`.
Who:   uvicorn (`uvicorn noteful.main:app`) and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │                      FastAPI App                        │
    │                                                         │
    │  Middleware Chain:                                      │
    │  ┌──────┐ ┌──────────┐ ┌─────────┐ ┌─────────────────┐  │
    │  │ CORS │→│  Req ID  │→│ Logging │→│ Bearer AuthGate │  │
    │  └──────┘ └──────────┘ └─────────┘ └─────────────────┘  │
    │                                                         │
    │  Routes (each one a Pipeline of stages):                │
    │  /api/folders  /api/folders/{id}                        │
    │  /api/notes    /api/notes/{id}     /     /health        │
    │                                                         │
    │  Exception Handlers:                                    │
    │  NotefulError→own status │ HTTP errors │ Exception→500  │
    └─────────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from noteful import __version__
from noteful.config import Settings, settings as default_settings
from noteful.database import create_engine, create_session_factory, dispose_engine
from noteful.exceptions import NotefulError
from noteful.middleware.auth import BearerAuthMiddleware
from noteful.middleware.logging import RequestLoggingMiddleware
from noteful.middleware.request_id import RequestIDMiddleware, request_id_var
from noteful.routes import folders, health, notes, root

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure the root logger once for the whole process.

    Format: 2026-01-15T12:00:00 [INFO] noteful.access: GET /api/notes 200 3.1ms [a1b2c3d4] from 10.0.0.5
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries that log every operation
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:  configure logging, report configuration problems.
    Shutdown: dispose the engine so every pooled connection is closed.
    """
    config: Settings = app.state.settings
    setup_logging(config.log_level)
    logger.info("Noteful API %s starting up...", __version__)

    try:
        config.validate_required_for_production()
    except ValueError as e:
        # The server still starts: /health stays reachable and the gate
        # answers 401 until the key is configured
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", config.backend_host, config.backend_port)

    yield

    logger.info("Noteful API shutting down...")
    await dispose_engine(app.state.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions that escape the pipelines to JSON responses.

    Handler hierarchy:
        NotefulError             → its own status and body
        HTTPException (routing)  → same status, {"error": {"message": ...}}
        RequestValidationError   → 400, {"error": {"message": ...}}
        Exception (fallback)     → 500, generic message, details logged only
    """

    @app.exception_handler(NotefulError)
    async def handle_noteful_error(request: Request, exc: NotefulError):
        rid = request_id_var.get("")
        logger.warning("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": {"message": str(exc.detail)}},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Request validation error: %s", rid, exc.errors())
        return JSONResponse(
            status_code=400,
            content={"error": {"message": "Invalid request"}},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Store failures and any other unhandled error.

        The stack trace is logged server-side; the client gets a generic
        message and the request ID for support.
        """
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error on %s %s: %s",
            rid,
            request.method,
            request.url.path,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {"message": "An unexpected error occurred"},
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to build from. Defaults to the process-wide
                  instance read from the environment.
    """
    config = settings or default_settings

    app = FastAPI(
        title="Noteful API",
        description="Folders and notes behind a bearer token, with HTML-escaped output.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Shared handles ────────────────────────────────────────────────────
    app.state.settings = config
    app.state.engine = create_engine(config)
    app.state.session_factory = create_session_factory(app.state.engine)

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in reverse order of addition:
    # CORS → RequestID → Logging → BearerAuth → routes
    app.add_middleware(BearerAuthMiddleware, secret=config.api_key)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(folders.router)
    app.include_router(notes.router)
    app.include_router(root.router)
    app.include_router(health.router)

    return app


# uvicorn expects `noteful.main:app` to be importable
app = create_app()
