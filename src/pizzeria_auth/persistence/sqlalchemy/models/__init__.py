from pizzeria_auth.persistence.sqlalchemy.models.session_model import SessionModel

__all__ = ["SessionModel"]
