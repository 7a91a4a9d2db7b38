"""
PhotoStudio Backend — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn photostudio.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  Req ID → Logging → No-Cache → Unhandled Error           │
    │         → GZip → CORS                                    │
    │                                                          │
    │  Routes:                                                 │
    │  contacts · bookings · portfolio · messages              │
    │  upload-image · send-email · /health                     │
    │                                                          │
    │  Exception Handlers:                                     │
    │  Validation→400 │ NotFound→404 │ Storage→500            │
    │  Integration→401/500 │ anything else→500                │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Build the store handle (unless one was injected)
    3. Warn about integrations without credentials
    4. Log startup complete

    Shutdown:
    1. Dispose the store handle's pool (only if this app built it)
    2. Log shutdown complete
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from photostudio import __version__
from photostudio.config import settings
from photostudio.exceptions import (
    IntegrationError,
    NotFoundError,
    PhotoStudioError,
    StorageError,
    ValidationError,
)
from photostudio.middleware.errors import UnhandledErrorMiddleware, unexpected_error_response
from photostudio.middleware.logging import RequestLoggingMiddleware
from photostudio.middleware.no_cache import NoCacheMiddleware
from photostudio.middleware.request_id import RequestIDMiddleware, request_id_var
from photostudio.routes import ALL_ROUTERS
from photostudio.schemas.validation import field_errors
from photostudio.services.email_service import EmailNotifier
from photostudio.services.image_host import ImageHostService
from photostudio.storage import Storage

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "An internal error occurred. Please try again later."


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2026-01-01T12:00:00 [INFO] photostudio.access: POST /api/contact → 201 (12ms)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosmtplib").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("PhotoStudio Backend %s starting up...", __version__)

    owns_storage = app.state.storage is None
    if owns_storage:
        app.state.storage = Storage.from_settings(settings)
        if settings.is_sqlite:
            # Local runs without migrations
            await app.state.storage.create_all()

    for warning in settings.missing_integrations():
        logger.warning("Configuration: %s", warning)

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("PhotoStudio Backend shutting down...")
    if owns_storage:
        await app.state.storage.dispose()
        app.state.storage = None
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, rid: str, details: Optional[dict] = None) -> dict:
    body = {"error": error, "message": message, "request_id": rid}
    if details:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request (field detail returned)
        RequestValidationError  → 400 Bad Request (malformed JSON, bad path id)
        NotFoundError           → 404 Not Found
        StorageError            → 500 Internal Server Error (generic message)
        IntegrationError        → 401 / 500 (generic message)
        PhotoStudioError (base) → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error (UnhandledErrorMiddleware
                                  answers handler errors inside the middleware chain)

    Only ValidationError exposes its context. Everything else is logged
    server-side and answered with a generic message.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", exc.message, rid, exc.context),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """FastAPI's own parsing failures (unparseable JSON, non-integer path id)."""
        rid = request_id_var.get("")
        errors = [e.as_dict() for e in field_errors(exc.errors())]
        logger.warning("[%s] Request validation error: %s", rid, errors)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", "Invalid input data", rid, {"errors": errors}),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content=_error_body("not_found", exc.message, rid),
        )

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        rid = request_id_var.get("")
        logger.error("[%s] Storage error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", GENERIC_SERVER_ERROR, rid),
        )

    @app.exception_handler(IntegrationError)
    async def handle_integration_error(request: Request, exc: IntegrationError):
        rid = request_id_var.get("")
        logger.error(
            "[%s] %s integration error: %s | Context: %s",
            rid, exc.service, exc.message, exc.context,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                "authentication_failed" if exc.auth_failure else "integration_error",
                exc.message,
                rid,
            ),
        )

    @app.exception_handler(PhotoStudioError)
    async def handle_app_error(request: Request, exc: PhotoStudioError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", GENERIC_SERVER_ERROR, rid),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Last resort for failures in the middleware chain itself; errors raised
        by handlers are answered by UnhandledErrorMiddleware."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return unexpected_error_response(rid)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    storage: Optional[Storage] = None,
    image_host: Optional[ImageHostService] = None,
    email_notifier: Optional[EmailNotifier] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        storage:        Store handle to use. When omitted the lifespan builds
                        one from settings and disposes it on shutdown.
        image_host:     Image host integration (default: built from settings)
        email_notifier: Email relay integration (default: built from settings)
    """
    app = FastAPI(
        title="PhotoStudio API",
        description=(
            "Backend for a photography studio website: contact form, booking "
            "requests, portfolio management, a message inbox, image uploads "
            "and email notifications."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.storage = storage
    app.state.image_host = image_host or ImageHostService(settings)
    app.state.email_notifier = email_notifier or EmailNotifier(settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → NoCache → UnhandledError → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(NoCacheMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    for router in ALL_ROUTERS:
        app.include_router(router)

    return app


app = create_app()
