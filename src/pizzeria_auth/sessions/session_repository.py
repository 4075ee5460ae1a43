"""Abstract repository interface for server-side session records.

Session keys never reach the repository in clear text; callers pass the
SHA-256 hex digest of the cookie value.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class SessionRecord:
    """Immutable session data returned by the repository."""

    key_hash: str
    data: dict[str, Any]
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class SessionRepository(ABC):
    """Abstract repository for per-client session data."""

    @abstractmethod
    async def find_valid(self, key_hash: str) -> SessionRecord | None:
        """Find an unexpired session by its key hash.

        Parameters
        ----------
        key_hash
            SHA-256 hex digest of the session key

        Returns
        -------
        The session record, or None if unknown or expired
        """

    @abstractmethod
    async def save(
        self,
        key_hash: str,
        data: dict[str, Any],
        expires_at: datetime,
    ) -> None:
        """Create or replace the data stored for a session."""

    @abstractmethod
    async def delete(self, key_hash: str) -> bool:
        """Delete a session.

        Returns
        -------
        True if deleted, False if not found
        """

    @abstractmethod
    async def purge_expired(self) -> int:
        """Delete all expired sessions.

        Returns
        -------
        Number of deleted sessions
        """
