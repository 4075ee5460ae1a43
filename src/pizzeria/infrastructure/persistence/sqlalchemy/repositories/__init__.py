# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations."""

from pizzeria.infrastructure.persistence.sqlalchemy.repositories.customer_repository import (
    CustomerRepositorySQLAlchemy,
)
from pizzeria.infrastructure.persistence.sqlalchemy.repositories.worker_repository import (
    WorkerRepositorySQLAlchemy,
)

__all__ = [
    "CustomerRepositorySQLAlchemy",
    "WorkerRepositorySQLAlchemy",
]
