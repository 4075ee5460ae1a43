"""FastAPI application factory.

Creates and configures the FastAPI application with its router,
middleware, and exception handlers.

Run with:
    uvicorn pizzeria.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pizzeria.presentation.api.dependencies import (
    create_engine,
    create_session_maker,
    create_tables,
)
from pizzeria.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from pizzeria.presentation.api.routers import auth_router
from pizzeria_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Sign-in, session status and customer registration.

**Principals:**
- Customers register themselves and sign in with their email
- Workers are provisioned by operators and sign in with their company email

**Sessions:**
- Server-side; the client only holds an HttpOnly session cookie
- Passwords are hashed with bcrypt
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


def _configure_logging(settings: Settings) -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for pizzeria modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("pizzeria").setLevel(log_level)
    logging.getLogger("pizzeria_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Pizzeria API v%s...", API_VERSION)
    try:
        await create_tables(app.state.engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    # Shutdown - dispose the engine and its connection pool
    logger.info("Shutting down Pizzeria API...")
    await app.state.engine.dispose()
    logger.info("Database connections closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Customer and worker authentication for the pizzeria.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.settings = settings
    app.state.engine = create_engine(settings)
    app.state.session_maker = create_session_maker(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(auth_router, prefix="/auth", tags=["Authentication"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint for load balancers and monitoring."""
        return {
            "status": "healthy",
            "version": API_VERSION,
        }

    return app
