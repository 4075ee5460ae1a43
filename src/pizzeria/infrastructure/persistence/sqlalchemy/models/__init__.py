# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for customers, addresses and employees."""

from pizzeria.infrastructure.persistence.sqlalchemy.models.address_model import (
    AddressModel,
)
from pizzeria.infrastructure.persistence.sqlalchemy.models.base import Base
from pizzeria.infrastructure.persistence.sqlalchemy.models.customer_model import (
    CustomerModel,
)
from pizzeria.infrastructure.persistence.sqlalchemy.models.employee_model import (
    EmployeeModel,
)

__all__ = [
    "AddressModel",
    "Base",
    "CustomerModel",
    "EmployeeModel",
]
