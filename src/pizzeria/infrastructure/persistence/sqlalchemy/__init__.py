"""SQLAlchemy persistence for customers and workers."""

from pizzeria.infrastructure.persistence.sqlalchemy.models import (
    AddressModel,
    Base,
    CustomerModel,
    EmployeeModel,
)
from pizzeria.infrastructure.persistence.sqlalchemy.repositories import (
    CustomerRepositorySQLAlchemy,
    WorkerRepositorySQLAlchemy,
)

__all__ = [
    "AddressModel",
    "Base",
    "CustomerModel",
    "CustomerRepositorySQLAlchemy",
    "EmployeeModel",
    "WorkerRepositorySQLAlchemy",
]
