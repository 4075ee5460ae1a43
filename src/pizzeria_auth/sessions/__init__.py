"""Server-side session store (interface and repository-backed implementation)."""

from pizzeria_auth.sessions.session_repository import (
    SessionRecord,
    SessionRepository,
)
from pizzeria_auth.sessions.session_store import (
    ServerSideSession,
    SessionStore,
    hash_session_key,
)

__all__ = [
    "ServerSideSession",
    "SessionRecord",
    "SessionRepository",
    "SessionStore",
    "hash_session_key",
]
