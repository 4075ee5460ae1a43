"""Pytest fixtures for API integration tests."""

import httpx
import pytest

from pizzeria.domain.principal import Worker
from pizzeria.infrastructure.persistence.sqlalchemy.repositories import (
    WorkerRepositorySQLAlchemy,
)
from pizzeria.presentation.api.app import create_app
from pizzeria.presentation.api.dependencies import create_tables
from pizzeria_auth import PasswordHashingService

WORKER_PASSWORD = "Oven456!"


@pytest.fixture
async def app(test_settings):
    """App wired to the test database; tables created up front."""
    app = create_app(settings=test_settings)
    await create_tables(app.state.engine)

    yield app

    await app.state.engine.dispose()


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def registration_payload() -> dict:
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "phone": "555-0100",
        "address1": "1 Main St",
        "address2": "",
        "city": "Springfield",
        "state": "IL",
        "zip": "01234",
        "email": "jane@gmail.com",
        "password": "Pizza123!",
    }


@pytest.fixture
async def registered_customer(client, registration_payload) -> dict:
    response = await client.post("/auth/register", json=registration_payload)
    assert response.status_code == 201
    return response.json()["user"]


async def _add_worker(app, email: str, role: str) -> int:
    password_hash = PasswordHashingService(rounds=4).hash(WORKER_PASSWORD)
    async with app.state.session_maker() as session:
        worker_id = await WorkerRepositorySQLAlchemy(session).add(
            Worker.create(
                email=email,
                first_name="Sam",
                last_name="Smith",
                password_hash=password_hash,
                role=role,
            ),
        )
        await session.commit()
    return worker_id


@pytest.fixture
async def worker(app) -> dict:
    worker_id = await _add_worker(app, "sam@work.com", "Manager")
    return {"id": worker_id, "email": "sam@work.com", "password": WORKER_PASSWORD}


@pytest.fixture
async def misfiled_worker(app) -> dict:
    """A worker row whose email is not on the company domain."""
    worker_id = await _add_worker(app, "moonlighter@gmail.com", "Cook")
    return {
        "id": worker_id,
        "email": "moonlighter@gmail.com",
        "password": WORKER_PASSWORD,
    }
