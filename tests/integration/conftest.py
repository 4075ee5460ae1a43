"""Shared fixtures for integration tests.

Each test gets its own SQLite database file under tmp_path.
"""

import pytest
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession

from pizzeria.presentation.api.dependencies import (
    create_engine,
    create_session_maker,
    create_tables,
)
from pizzeria_config.settings import Settings

COMPANY_DOMAIN = "work.com"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway database, with HTTP-friendly cookies."""
    return Settings(
        _env_file=None,
        company_email_domain=COMPANY_DOMAIN,
        postgres_password=SecretStr("test-password"),
        database_url_override=f"sqlite+aiosqlite:///{tmp_path / 'pizzeria.db'}",
        api_cookie_secure=False,  # Allow HTTP in tests
        password_hash_rounds=4,  # Low rounds for fast tests
        api_debug=True,
    )


@pytest.fixture
async def db_engine(test_settings):
    engine = create_engine(test_settings)
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncSession:
    async with create_session_maker(db_engine)() as session:
        yield session
