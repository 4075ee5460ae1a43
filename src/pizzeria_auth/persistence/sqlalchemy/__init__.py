"""SQLAlchemy implementation for pizzeria_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- SessionModel: SQLAlchemy model for server-side sessions
- SessionRepositorySQLAlchemy: Repository implementation

Note: The consuming application must create AuthBase.metadata
next to its own tables.
"""

from pizzeria_auth.persistence.sqlalchemy.base import AuthBase
from pizzeria_auth.persistence.sqlalchemy.models import SessionModel
from pizzeria_auth.persistence.sqlalchemy.repositories import (
    SessionRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "SessionModel",
    "SessionRepositorySQLAlchemy",
]
