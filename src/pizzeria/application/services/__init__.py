"""Application layer services."""

from pizzeria.application.services.authentication_service import (
    SESSION_EMAIL,
    SESSION_ROLE,
    SESSION_USER_ID,
    AuthenticationService,
)

__all__ = [
    "SESSION_EMAIL",
    "SESSION_ROLE",
    "SESSION_USER_ID",
    "AuthenticationService",
]
