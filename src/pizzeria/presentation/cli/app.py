"""Pizzeria CLI application using Typer.

Operator utilities: serving the HTTP API, provisioning worker accounts
and housekeeping of the session table.
"""

import asyncio

import typer
import uvicorn
from rich.console import Console

from pizzeria.domain.principal import EmailAlreadyExistsError, Worker
from pizzeria.infrastructure.persistence.sqlalchemy.repositories import (
    WorkerRepositorySQLAlchemy,
)
from pizzeria.presentation.api.dependencies import (
    create_engine,
    create_session_maker,
    create_tables,
)
from pizzeria_auth import (
    PasswordHashingService,
    PrincipalType,
    PrincipalTypeResolver,
    WeakPasswordError,
)
from pizzeria_auth.persistence.sqlalchemy import SessionRepositorySQLAlchemy
from pizzeria_config.settings import Settings, get_settings

app = typer.Typer(
    name="pizzeria",
    help="Pizzeria authentication service CLI",
    no_args_is_help=True,
)
console = Console()


workers_app = typer.Typer(
    name="workers",
    help="Worker account management",
    no_args_is_help=True,
)
app.add_typer(workers_app)

sessions_app = typer.Typer(
    name="sessions",
    help="Server-side session housekeeping",
    no_args_is_help=True,
)
app.add_typer(sessions_app)


async def _create_worker(settings: Settings, worker: Worker) -> int:
    engine = create_engine(settings)
    try:
        await create_tables(engine)
        async with create_session_maker(engine)() as session:
            worker_id = await WorkerRepositorySQLAlchemy(session).add(worker)
            await session.commit()
            return worker_id
    finally:
        await engine.dispose()


async def _purge_sessions(settings: Settings) -> int:
    engine = create_engine(settings)
    try:
        await create_tables(engine)
        async with create_session_maker(engine)() as session:
            purged = await SessionRepositorySQLAlchemy(session).purge_expired()
            await session.commit()
            return purged
    finally:
        await engine.dispose()


@workers_app.command("create")
def create_worker(
    email: str = typer.Option(..., "--email", help="Company email address"),
    first_name: str = typer.Option(..., "--first-name"),
    last_name: str = typer.Option(..., "--last-name"),
    role: str = typer.Option(..., "--role", help='Free-form role, e.g. "Manager"'),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
    ),
) -> None:
    """Provision a worker account.

    Workers cannot register themselves; their email must belong to the
    company domain.
    """
    settings = get_settings()
    resolver = PrincipalTypeResolver(settings.company_email_domain)

    if resolver.resolve(email) is not PrincipalType.WORKER:
        console.print(
            f"[red]{email} is not a {resolver.company_domain} address; "
            "workers must use the company domain.[/red]"
        )
        raise typer.Exit(1)

    password_service = PasswordHashingService(rounds=settings.password_hash_rounds)
    try:
        password_hash = password_service.hash(password)
    except WeakPasswordError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1) from e

    worker = Worker.create(
        email=email,
        first_name=first_name,
        last_name=last_name,
        password_hash=password_hash,
        role=role,
    )
    try:
        worker_id = asyncio.run(_create_worker(settings, worker))
    except EmailAlreadyExistsError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1) from e

    console.print(
        f"[green]Created worker[/green] [bold]{email}[/bold] "
        f"(id: {worker_id}, role: {role})"
    )


@app.command("serve")
def serve() -> None:
    """Run the HTTP API with uvicorn on API_HOST:API_PORT."""
    settings = get_settings()
    console.print(
        f"[green]Serving[/green] {settings.app_name} on "
        f"http://{settings.api_host}:{settings.api_port}"
    )
    uvicorn.run(
        "pizzeria.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


@sessions_app.command("purge")
def purge_sessions() -> None:
    """Delete expired sessions."""
    purged = asyncio.run(_purge_sessions(get_settings()))
    console.print(f"[green]Purged {purged} expired session(s)[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
