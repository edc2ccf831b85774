"""
Pastoral Admin Backend — FastAPI Application Factory
======================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the engine, session factory and services, then
       registers middleware, exception handlers and routers.
Who:   uvicorn (uvicorn pastoral_admin.main:app) and the test suite, which
       calls create_app() with its own settings and session factory.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌────────────┐ ┌──────────┐ ┌────────────┐ ┌─────────┐  │
    │  │ Rate Limit │→│ Req ID   │→│ Access Log │→│GZip/CORS│  │
    │  └────────────┘ └──────────┘ └────────────┘ └─────────┘  │
    │                                                          │
    │  Routes (/api/admin, admin key required):                │
    │  ┌────────┐ ┌─────────┐ ┌──────────┐ ┌───────────────┐   │
    │  │ church │ │ address │ │ industry │ │ field-of-work │   │
    │  └────────┘ └─────────┘ └──────────┘ └───────────────┘   │
    │  GET /health                                             │
    │                                                          │
    │  Exception Handlers:                                     │
    │  ┌────────────────────────────────────────────────────┐  │
    │  │ NotFound→404 │ AlreadyExists→409 │ Unauthorized→401│  │
    │  │ RateLimit→429 │ Internal→500 │ unexpected→500      │  │
    │  └────────────────────────────────────────────────────┘  │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, check security settings, log readiness
    Shutdown: dispose the engine (close pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pastoral_admin import __version__
from pastoral_admin.config import Settings, settings as default_settings
from pastoral_admin.database import create_engine, create_session_factory, dispose_engine
from pastoral_admin.dependencies import build_services
from pastoral_admin.exceptions import (
    AlreadyExistsError,
    InternalError,
    NotFoundError,
    PastoralAdminError,
    RateLimitExceededError,
    UnauthorizedError,
)
from pastoral_admin.middleware.logging import RequestLoggingMiddleware
from pastoral_admin.middleware.rate_limit import RateLimitMiddleware
from pastoral_admin.middleware.request_id import RequestIDMiddleware, request_id_var
from pastoral_admin.routes import address, church, field_of_work, health, industry

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "An internal error occurred. Please try again later."


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once, at startup.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output goes to stdout, where the container runtime collects it.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-statement and per-request chatter
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
        1. Configure logging at LOG_LEVEL
        2. Validate security settings; a missing ADMIN_API_KEY is logged,
           not fatal, so local development works without one
    Shutdown:
        1. Dispose the engine
    """
    app_settings: Settings = app.state.settings

    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("Pastoral Admin Backend %s starting up...", __version__)

    try:
        app_settings.validate_required_for_production()
    except ValueError as e:
        logger.warning("%s", e)
        logger.warning("Admin routes are running without the X-Admin-Key check.")

    logger.info("Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Pastoral Admin Backend shutting down...")
    await dispose_engine(app.state.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, error: str, message: str, details: Optional[dict] = None, headers=None):
    content = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map domain errors to HTTP responses.

    Handler hierarchy:
        NotFoundError           → 404 not_found
        AlreadyExistsError      → 409 already_exists
        UnauthorizedError       → 401 unauthorized
        RateLimitExceededError  → 429 rate_limit_exceeded
        InternalError           → 500 server_error (generic message)
        PastoralAdminError      → 500 server_error (generic message)
        Exception               → 500 internal_server_error

    5xx responses never carry the cause; it is in the server log, findable
    by request_id.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error(404, "not_found", exc.message)

    @app.exception_handler(AlreadyExistsError)
    async def handle_already_exists(request: Request, exc: AlreadyExistsError):
        return _error(409, "already_exists", exc.message, details=exc.context)

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        logger.warning("[%s] Unauthorized admin request: %s", request_id_var.get(""), exc.context)
        return _error(401, "unauthorized", exc.message)

    @app.exception_handler(RateLimitExceededError)
    async def handle_rate_limit(request: Request, exc: RateLimitExceededError):
        return _error(
            429,
            "rate_limit_exceeded",
            exc.message,
            details=exc.context,
            headers={"Retry-After": str(exc.retry_after)},
        )

    @app.exception_handler(InternalError)
    async def handle_internal(request: Request, exc: InternalError):
        # The service already logged the cause with its traceback
        logger.error("[%s] Internal error | Context: %s", request_id_var.get(""), exc.context)
        return _error(500, "server_error", GENERIC_SERVER_ERROR)

    @app.exception_handler(PastoralAdminError)
    async def handle_app_error(request: Request, exc: PastoralAdminError):
        logger.error("[%s] Unhandled application error: %s | Context: %s",
                     request_id_var.get(""), exc.message, exc.context)
        return _error(500, "server_error", GENERIC_SERVER_ERROR)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("[%s] Unexpected error: %s", request_id_var.get(""), exc, exc_info=exc)
        return _error(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[AsyncEngine] = None,
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
) -> FastAPI:
    """
    Assemble the application.

    Args:
        settings: Defaults to the environment-loaded settings
        engine: Defaults to an engine built from settings.database_url
        session_factory: Defaults to a factory bound to `engine`

    Tests pass an in-memory SQLite engine and factory, or override the
    get_*_service dependencies with mocks.
    """
    settings = settings or default_settings
    engine = engine or create_engine(settings)
    session_factory = session_factory or create_session_factory(engine)

    app = FastAPI(
        title="Pastoral Admin API",
        description=(
            "Administration backend for churches, their addresses, and the "
            "industry and field-of-work lookup lists."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.services = build_services(session_factory)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RateLimit → RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count", "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        max_requests=settings.rate_limit_requests,
        window_seconds=settings.rate_limit_window,
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(church.router)
    app.include_router(address.router)
    app.include_router(industry.router)
    app.include_router(field_of_work.router)
    app.include_router(health.router)

    return app


# uvicorn pastoral_admin.main:app
app = create_app()
