"""SQLAlchemy declarative base for pizzeria_auth models.

This provides a separate Base for auth models. The consuming application
creates AuthBase.metadata alongside its own metadata.
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for pizzeria_auth models."""
