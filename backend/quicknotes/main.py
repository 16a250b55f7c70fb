"""
QuickNotes Backend — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn quicknotes.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                       FastAPI App                        │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────┐            │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│ CORS │            │
    │  └──────────┘ └──────────┘ └──────┘ └──────┘            │
    │                                                          │
    │  Routes:                                                 │
    │  ┌───────┐ ┌────────────────────────────┐ ┌──────────┐  │
    │  │ GET / │ │ GET/POST/DELETE /api/notes │ │ /health  │  │
    │  └───────┘ └────────────────────────────┘ └──────────┘  │
    │                                                          │
    │  Exception Handlers:                                     │
    │  ┌────────────────────────────────────────────────────┐ │
    │  │ Validation→400 │ NotFound→404 │ DB→500 │ other→500 │ │
    │  └────────────────────────────────────────────────────┘ │
    └──────────────────────────────────────────────────────────┘

Every error body has the same shape:
    {"error": "<human message>", "code": "<machine code>", "request_id": "<id>"}
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from quicknotes import __version__
from quicknotes.config import settings
from quicknotes.database import create_tables, dispose_engine
from quicknotes.exceptions import (
    DatabaseError,
    NotFoundError,
    QuickNotesError,
    ValidationError,
)
from quicknotes.middleware.logging import RequestLoggingMiddleware
from quicknotes.middleware.request_id import RequestIDMiddleware, request_id_var
from quicknotes.routes import health, notes
from quicknotes.schemas.note import REQUIRED_FIELDS_MESSAGE
from quicknotes.ui import page

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = {"title", "content"}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    When:    Called once during app startup, before anything else logs.
    Format:  %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Containers capture stdout
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Create tables when DB_CREATE_TABLES is set (otherwise Alembic owns the schema)
    Shutdown:
        1. Dispose database engine (close all pooled connections)
    """
    setup_logging()
    logger.info("QuickNotes Backend %s starting up...", __version__)

    if settings.db_create_tables:
        await create_tables()
        logger.info("Database tables ensured")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("QuickNotes Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "code": code,
            "request_id": request_id_var.get(""),
        },
    )


def describe_request_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Turn FastAPI's request validation errors into one user-facing sentence.

    A missing or blank title/content reads the same as the UI's own check.
    """
    for err in errors:
        loc: List[Any] = list(err.get("loc", ()))
        field = loc[-1] if loc else None
        if field in REQUIRED_FIELDS and err.get("type") in {"missing", "value_error"}:
            return REQUIRED_FIELDS_MESSAGE
        if field == "title" and err.get("type") == "string_too_long":
            return "Title is too long"
    return "Invalid request body"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the shared error body.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request (malformed/missing body fields)
        NotFoundError           → 404 Not Found
        DatabaseError           → 500 Internal Server Error (generic message)
        QuickNotesError (base)  → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Internal details (SQL, stack traces) are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return error_response(400, exc.message, "validation_error")

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = describe_request_errors(exc.errors())
        logger.warning("[%s] Invalid request body: %s", request_id_var.get(""), message)
        return error_response(400, message, "validation_error")

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(404, exc.message, "not_found")

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return error_response(500, exc.message, "server_error")

    @app.exception_handler(QuickNotesError)
    async def handle_app_error(request: Request, exc: QuickNotesError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return error_response(500, exc.message, "server_error")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all; the stack trace goes to the log only."""
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return error_response(
            500,
            "An unexpected error occurred. Please try again.",
            "internal_server_error",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="QuickNotes API",
        description="Create, list and delete short text notes.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(notes.router)
    app.include_router(health.router)
    app.include_router(page.router)

    return app


app = create_app()
