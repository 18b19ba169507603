"""
Warehouse Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn warehouse.main:app) or by cli_entry().

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────┐ ┌──────────┐ ┌─────────┐ ┌──────┐         │
    │  │ CORS │→│ Req ID   │→│ Logging │→│ GZip │         │
    │  └──────┘ └──────────┘ └─────────┘ └──────┘         │
    │                                                     │
    │  Routes:                                            │
    │  /  /health  /api/users  /api/schedule              │
    │  /api/shipment  /api/miscellaneous[/save]           │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ ValidationError→400 │ DatabaseError→500      │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup (completes before uvicorn accepts connections):
    1. Initialize logging
    2. Create missing tables (idempotent bootstrap)

    Shutdown:
    1. Dispose database engine (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from warehouse import __version__
from warehouse.config import settings
from warehouse.database import dispose_engine, init_schema
from warehouse.exceptions import DatabaseError, ValidationError, WarehouseError
from warehouse.middleware.logging import RequestLoggingMiddleware
from warehouse.middleware.request_id import RequestIDMiddleware, request_id_var
from warehouse.routes import records, root, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (containers capture it)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Access lines come from RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    if settings.log_level != "DEBUG":
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Two-phase startup: persistence first, then serving.

    Code before ``yield`` finishes before the server accepts its first
    connection, so every request sees an initialized schema. A bootstrap
    failure propagates and aborts startup.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Warehouse Backend %s starting up...", __version__)

    await init_schema()

    logger.info("Backend running on http://%s:%d", settings.host, settings.port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Warehouse Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _describe_request_error(exc: RequestValidationError) -> str:
    """Turn FastAPI's body validation errors into a one-line message."""
    for error in exc.errors():
        error_type = error.get("type", "")
        if error_type == "json_invalid":
            return "Malformed JSON in request body"
        if error_type == "missing":
            loc = [str(part) for part in error.get("loc", ()) if part != "body"]
            if loc:
                return f"Missing '{loc[-1]}' in request body"
            return "Missing request body"
    return "Invalid request body"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError          → 400 Bad Request
        RequestValidationError   → 400 Bad Request (absent field, bad JSON)
        DatabaseError            → 500 Internal Server Error
        WarehouseError (base)    → 500 Internal Server Error
        anything else            → 500 from RequestIDMiddleware

    Every error body has the shape ``{"error": str, "request_id": str}``.
    Driver errors and tracebacks are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={"error": exc.message, "request_id": rid},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        message = _describe_request_error(exc)
        logger.warning("[%s] Rejected request body: %s", rid, message)
        return JSONResponse(
            status_code=400,
            content={"error": message, "request_id": rid},
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"error": exc.message, "request_id": rid},
        )

    @app.exception_handler(WarehouseError)
    async def handle_warehouse_error(request: Request, exc: WarehouseError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"error": exc.message, "request_id": rid},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Warehouse Backend API",
        description=(
            "JSON storage for warehouse users, schedules, shipments and "
            "miscellaneous records."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # CORS → RequestID → Logging → GZip
    # CORS is outermost so every response, including 500s produced by
    # RequestIDMiddleware, carries the CORS headers.
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(users.router)
    app.include_router(records.router)

    return app


def cli_entry() -> None:
    """CLI entry point for running the server."""
    import uvicorn

    uvicorn.run(
        "warehouse.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# uvicorn expects `warehouse.main:app` to be importable
app = create_app()
