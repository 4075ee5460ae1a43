"""FastAPI dependency injection for the Pizzeria API.

Provides dependencies for:
- Settings (stored on the app by the factory)
- Database sessions
- The per-client server-side session
- Service instances
"""

import logging
from datetime import timedelta
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pizzeria.application.services import AuthenticationService
from pizzeria.infrastructure.persistence.sqlalchemy.models import Base
from pizzeria.infrastructure.persistence.sqlalchemy.repositories import (
    CustomerRepositorySQLAlchemy,
    WorkerRepositorySQLAlchemy,
)
from pizzeria_auth import (
    PasswordHashingService,
    PrincipalTypeResolver,
    ServerSideSession,
)
from pizzeria_auth.persistence.sqlalchemy import (
    AuthBase,
    SessionRepositorySQLAlchemy,
)
from pizzeria_config.settings import Settings

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Database Engine & Session
# -----------------------------------------------------------------------------


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async database engine for ``settings``.

    The engine manages the connection pool; the app factory creates one per
    application and reuses it across all requests.
    """
    url = settings.database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.run_sync(AuthBase.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the app's shared engine.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_type_resolver(settings: SettingsDep) -> PrincipalTypeResolver:
    return PrincipalTypeResolver(settings.company_email_domain)


async def get_authentication_service(
    session: DBSession,
    password_service: PasswordHashingService = Depends(get_password_service),
    type_resolver: PrincipalTypeResolver = Depends(get_type_resolver),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates sign-in, session status and registration.
    """
    return AuthenticationService(
        customer_repository=CustomerRepositorySQLAlchemy(session),
        worker_repository=WorkerRepositorySQLAlchemy(session),
        password_service=password_service,
        type_resolver=type_resolver,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_http_session(
    request: Request,
    session: DBSession,
    settings: SettingsDep,
) -> ServerSideSession:
    """
    Bind the caller's session cookie (if any) to a server-side session.

    Shares the request's database session, so session writes are committed
    together with everything else the endpoint does.
    """
    return ServerSideSession(
        repository=SessionRepositorySQLAlchemy(session),
        session_key=request.cookies.get(settings.session_cookie_name),
        max_age=timedelta(minutes=settings.session_max_age_minutes),
    )


HttpSession = Annotated[ServerSideSession, Depends(get_http_session)]
