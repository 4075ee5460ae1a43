"""Shared domain building blocks."""

from pizzeria.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
)
from pizzeria.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "ErrorCode",
    "ensure_tz_aware",
    "utc_now",
]
