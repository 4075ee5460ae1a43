"""Integration tests for the operator CLI."""

import asyncio

import pytest
from typer.testing import CliRunner

from pizzeria.infrastructure.persistence.sqlalchemy.repositories import (
    WorkerRepositorySQLAlchemy,
)
from pizzeria.presentation.api.dependencies import (
    create_engine,
    create_session_maker,
)
from pizzeria.presentation.cli.app import app
from pizzeria_auth import PasswordHashingService
from pizzeria_config import get_settings

pytestmark = pytest.mark.integration

runner = CliRunner()


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    monkeypatch.setenv("COMPANY_EMAIL_DOMAIN", "work.com")
    monkeypatch.setenv("POSTGRES_PASSWORD", "test-password")
    monkeypatch.setenv(
        "DATABASE_URL_OVERRIDE",
        f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}",
    )
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "4")


def _find_worker(email: str):
    async def find():
        engine = create_engine(get_settings())
        try:
            async with create_session_maker(engine)() as session:
                return await WorkerRepositorySQLAlchemy(session).find_by_identifier(
                    email,
                )
        finally:
            await engine.dispose()

    return asyncio.run(find())


def _create(email: str, password_input: str = "Oven456!\nOven456!\n"):
    return runner.invoke(
        app,
        [
            "workers",
            "create",
            "--email",
            email,
            "--first-name",
            "Sam",
            "--last-name",
            "Smith",
            "--role",
            "Manager",
        ],
        input=password_input,
    )


class TestWorkersCreate:
    def test_creates_worker_with_hashed_password(self, cli_env):
        result = _create("sam@work.com")

        assert result.exit_code == 0, result.output
        assert "Created worker" in result.output

        worker = _find_worker("sam@work.com")
        assert worker is not None
        assert worker.role == "Manager"
        assert PasswordHashingService(rounds=4).verify(
            "Oven456!",
            worker.password_hash,
        )

    def test_refuses_non_company_email(self, cli_env):
        result = _create("sam@gmail.com")

        assert result.exit_code == 1
        assert "company domain" in result.output

    def test_refuses_duplicate(self, cli_env):
        assert _create("sam@work.com").exit_code == 0

        result = _create("sam@work.com")

        assert result.exit_code == 1
        assert "already exists" in result.output


class TestSessionsPurge:
    def test_purge_on_empty_table(self, cli_env):
        result = runner.invoke(app, ["sessions", "purge"])

        assert result.exit_code == 0, result.output
        assert "Purged 0 expired session(s)" in result.output


class TestServe:
    def test_runs_app_factory_with_configured_address(self, cli_env, monkeypatch):
        calls = []
        monkeypatch.setenv("API_HOST", "127.0.0.1")
        monkeypatch.setenv("API_PORT", "9090")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        monkeypatch.setattr(
            "pizzeria.presentation.cli.app.uvicorn.run",
            lambda target, **kwargs: calls.append((target, kwargs)),
        )

        result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0, result.output
        assert calls == [
            (
                "pizzeria.presentation.api.app:create_app",
                {
                    "factory": True,
                    "host": "127.0.0.1",
                    "port": 9090,
                    "reload": True,
                    "log_level": "info",
                },
            ),
        ]

    def test_defaults_bind_all_interfaces_without_reload(
        self,
        cli_env,
        monkeypatch,
    ):
        calls = []
        monkeypatch.delenv("API_HOST", raising=False)
        monkeypatch.delenv("API_PORT", raising=False)
        monkeypatch.delenv("DEBUG", raising=False)
        monkeypatch.setattr(
            "pizzeria.presentation.cli.app.uvicorn.run",
            lambda target, **kwargs: calls.append(kwargs),
        )

        result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0, result.output
        assert calls[0]["host"] == "0.0.0.0"
        assert calls[0]["port"] == 8000
        assert calls[0]["reload"] is False
