"""Pizzeria Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the customer/worker domain. It handles:
- Password hashing (bcrypt)
- Principal type resolution (worker vs. customer by email domain)
- Server-side sessions (with pluggable persistence)

Architecture:
    pizzeria_auth/
    ├── services/           # Pure logic (password hashing, type resolution)
    ├── sessions/           # Session store and repository interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    └── exceptions.py       # Auth exceptions

Usage:
    from pizzeria_auth import PasswordHashingService, PrincipalTypeResolver
    from pizzeria_auth.persistence.sqlalchemy import SessionRepositorySQLAlchemy
"""

from pizzeria_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidIdentifierError,
    WeakPasswordError,
)
from pizzeria_auth.services import (
    PasswordHashingService,
    PrincipalType,
    PrincipalTypeResolver,
)
from pizzeria_auth.sessions import (
    ServerSideSession,
    SessionRepository,
    SessionStore,
)

__all__ = [
    # Services
    "PasswordHashingService",
    "PrincipalType",
    "PrincipalTypeResolver",
    # Sessions
    "ServerSideSession",
    "SessionRepository",
    "SessionStore",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidIdentifierError",
    "WeakPasswordError",
]
