"""Auth services - password hashing and principal type resolution."""

from pizzeria_auth.services.password_service import PasswordHashingService
from pizzeria_auth.services.principal_type_resolver import (
    PrincipalType,
    PrincipalTypeResolver,
)

__all__ = [
    "PasswordHashingService",
    "PrincipalType",
    "PrincipalTypeResolver",
]
