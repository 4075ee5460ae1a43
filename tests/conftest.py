"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/           # Fast, isolated tests (mocks, no database)
    └── integration/    # Tests against a throwaway SQLite database
        ├── api/        # HTTP endpoints through the ASGI app
        └── persistence/

Integration tests run against aiosqlite files under tmp_path, so they need
no external services and are not skipped by default.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from pizzeria_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )


@pytest.fixture(autouse=True)
def fresh_settings_cache():
    """Never let one test see settings cached by another."""
    clear_settings_cache()
    yield
    clear_settings_cache()
