from pizzeria_auth.persistence.sqlalchemy.repositories.session_repository import (
    SessionRepositorySQLAlchemy,
)

__all__ = ["SessionRepositorySQLAlchemy"]
