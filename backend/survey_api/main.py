"""
Survey API Backend: FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes app configuration, middleware registration, route mounting,
       and lifecycle management in one place.
How:   Factory pattern: create_app(settings) returns a configured FastAPI instance
       owning its own database engine (stored on app.state).
Who:   Called by uvicorn to start the server (uvicorn survey_api.main:app),
       and by the test suite with test settings.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  /api/surveys  /api/survey-responses  /api/users    │
    │  /api/providers  /api/feedback  /health             │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ Unauthorized→401 │ NotFound→404   │
    │  Database→500   │ anything else→500                 │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Create tables when running on SQLite (PostgreSQL uses Alembic)
    3. Log startup complete

    Shutdown:
    1. Dispose database engine (close all connections)
    2. Log shutdown complete
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from survey_api import __version__
from survey_api.config import Settings, settings as default_settings
from survey_api.database import (
    create_engine,
    create_session_factory,
    create_tables,
    dispose_engine,
)
from survey_api.exceptions import (
    DatabaseError,
    NotFoundError,
    SurveyAppError,
    UnauthorizedError,
    ValidationError,
)
from survey_api.middleware.logging import RequestLoggingMiddleware
from survey_api.middleware.request_id import RequestIDMiddleware, request_id_var
from survey_api.routes import feedback, health, responses, surveys, users
from survey_api.security import create_password_context
from survey_api.services.user_service import UserService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure process-wide logging once, before anything else logs.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (the container runtime captures it)
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Code before yield runs on startup, code after yield on shutdown.
    """
    app_settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("Survey API starting up...")

    if app_settings.is_sqlite:
        # No migrations for throwaway SQLite databases
        await create_tables(app.state.engine)
        logger.info("SQLite schema ensured")

    logger.info(
        "Server ready at http://%s:%d",
        app_settings.backend_host,
        app_settings.backend_port,
    )
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Survey API shutting down...")
    await dispose_engine(app.state.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 (body failed schema parsing)
        UnauthorizedError       → 401 Unauthorized
        NotFoundError           → 404 Not Found
        DatabaseError           → 500 (generic message, details logged)
        SurveyAppError (base)   → 500
        Exception (fallback)    → 500 (fixed message, traceback logged)

    Security: handlers NEVER put stack traces or SQL in the response body.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        """Client sent invalid input; tell them what's wrong."""
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Body or parameters did not parse; same envelope as ValidationError."""
        rid = request_id_var.get("")
        errors = jsonable_encoder(exc.errors())
        logger.warning("[%s] Request validation failed: %d error(s)", rid, len(errors))
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": "Request body is not valid.",
                "details": {"errors": errors},
                "request_id": rid,
            },
        )

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        rid = request_id_var.get("")
        logger.warning("[%s] Login rejected: %s", rid, exc.message)
        return JSONResponse(
            status_code=401,
            content={
                "error": "unauthorized",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        """Requested document doesn't exist."""
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Database error: generic message to user, details logged server-side."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(SurveyAppError)
    async def handle_app_error(request: Request, exc: SurveyAppError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for truly unexpected errors.

        Returns a generic 500 with the request id; the stack trace is logged
        server-side only.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
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
        settings: Configuration for this instance. Defaults to the
                  environment-derived process settings.

    Returns: Fully configured FastAPI instance ready to receive requests.

    The engine, session factory and UserService are built here (not at
    import) from `settings` and kept on app.state, so every request's
    session and password policy come from the app serving it and tests get
    an isolated database per app.
    """
    app_settings = settings or default_settings

    app = FastAPI(
        title="Survey API",
        description=(
            "Backend for a survey application: surveys, survey responses, "
            "user accounts and feedback."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    engine = create_engine(app_settings)
    app.state.settings = app_settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.user_service = UserService(create_password_context(app_settings.bcrypt_rounds))

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = first to run)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(surveys.router)
    app.include_router(responses.router)
    app.include_router(users.router)
    app.include_router(feedback.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `survey_api.main:app` to be importable
app = create_app()


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "survey_api.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )
