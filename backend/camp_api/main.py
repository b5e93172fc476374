"""
Camp API Backend: FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() takes an ApiRegistry (the explicit table of exposed
       collections), mounts one router per enabled API version, and wires
       middleware and exception handlers around it.
Who:   uvicorn (uvicorn camp_api.main:app) and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌────────┐ ┌──────┐  │
    │  │  Request ID  │→│ Logging  │→│  GZip  │→│ CORS │  │
    │  └──────────────┘ └──────────┘ └────────┘ └──────┘  │
    │                                                     │
    │  Routes (from registry):                            │
    │  ┌──────────────────────┐ ┌──────────────────────┐  │
    │  │ GET /api/v1/campers  │ │ GET /api/v1/campsites│  │
    │  └──────────────────────┘ └──────────────────────┘  │
    │  ┌──────────────┐                                   │
    │  │ GET /health  │                                   │
    │  └──────────────┘                                   │
    │                                                     │
    │  Exception Handlers:                                │
    │  Serialization→500 │ Database→500 │ other→500     │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from camp_api import __version__
from camp_api.config import settings
from camp_api.database import dispose_engine
from camp_api.exceptions import (
    CampApiError,
    DatabaseError,
    SerializationError,
)
from camp_api.middleware.logging import RequestLoggingMiddleware
from camp_api.middleware.request_id import RequestIDMiddleware, request_id_var
from camp_api.registry import ApiRegistry, build_default_registry
from camp_api.routes import health
from camp_api.routes.collections import build_version_router

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] camp_api.access: GET /api/v1/campers 200 ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-request noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Camp API %s starting up...", __version__)

    registry: ApiRegistry = app.state.registry
    for resource in registry:
        state = "mounted" if resource.version in app.state.mounted_versions else "disabled"
        logger.info(
            "  GET %s → %s %s (%s)",
            resource.path,
            resource.model.__name__,
            list(resource.serializer.fields),
            state,
        )

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Camp API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    return request_id_var.get("") or getattr(request.state, "request_id", "")


def _server_error(rid: str, error: str, message: str) -> JSONResponse:
    # The catch-all handler runs outside RequestIDMiddleware, so the
    # correlation header is set here as well
    return JSONResponse(
        status_code=500,
        content={"error": error, "message": message, "request_id": rid},
        headers={"X-Request-ID": rid} if rid else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler hierarchy:
        SerializationError   → 500 (generic message, record logged)
        DatabaseError        → 500 (generic message, context logged)
        CampApiError (base)  → 500
        Exception (fallback) → 500

    Unknown paths and verbs keep FastAPI's own 404/405 bodies.
    Internal details (SQL, record reprs, stack traces) never reach the
    response body; they are logged with the request ID instead.
    """

    @app.exception_handler(SerializationError)
    async def handle_serialization_error(request: Request, exc: SerializationError):
        rid = _request_id(request)
        logger.error("[%s] Serialization error: %s | Context: %s", rid, exc.message, exc.context)
        return _server_error(rid, "server_error", "An internal error occurred. Please try again later.")

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = _request_id(request)
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return _server_error(rid, "server_error", "An internal error occurred. Please try again later.")

    @app.exception_handler(CampApiError)
    async def handle_app_error(request: Request, exc: CampApiError):
        rid = _request_id(request)
        logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return _server_error(rid, "server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = _request_id(request)
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _server_error(
            rid,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(registry: Optional[ApiRegistry] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        registry: Collections to expose. Defaults to build_default_registry().
                  Tests pass their own to mount extra versions or serializers.

    Only versions listed in settings.api_versions are routed; a registered
    but disabled version answers 404 like any unknown path.
    """
    if registry is None:
        registry = build_default_registry()

    app = FastAPI(
        title="Camp API",
        description="Read-only JSON API for campers and campsites.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Middleware ────────────────────────────────────────────────────────
    # Executes in REVERSE order of addition: RequestID runs first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Routes ────────────────────────────────────────────────────────────
    enabled = set(settings.api_versions_list)
    mounted = tuple(v for v in registry.versions() if v in enabled)
    for version in mounted:
        app.include_router(build_version_router(version, registry))
    app.include_router(health.router)

    app.state.registry = registry
    app.state.mounted_versions = mounted
    return app


app = create_app()
