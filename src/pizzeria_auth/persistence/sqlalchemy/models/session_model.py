"""SQLAlchemy model for server-side HTTP sessions."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from pizzeria.domain.shared.time import utc_now
from pizzeria_auth.persistence.sqlalchemy.base import AuthBase


class SessionModel(AuthBase):
    """One row per live client session, keyed by the hash of its cookie."""

    __tablename__ = "http_sessions"

    session_key_hash: Mapped[str] = mapped_column(String(64), primary_key=True)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )

    def __repr__(self) -> str:
        return f"<SessionModel(expires_at={self.expires_at})>"
