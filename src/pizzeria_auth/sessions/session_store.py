"""Per-client session state kept on the server.

The client only ever holds an opaque random key (in a cookie). The data
itself lives behind a SessionRepository, indexed by the key's SHA-256 hash.
"""

from __future__ import annotations

import hashlib
import logging
import secrets
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any

from pizzeria.domain.shared.time import utc_now
from pizzeria_auth.sessions.session_repository import SessionRepository

logger = logging.getLogger(__name__)

SESSION_KEY_BYTES = 32


def hash_session_key(session_key: str) -> str:
    return hashlib.sha256(session_key.encode("utf-8")).hexdigest()


class SessionStore(ABC):
    """Key/value state scoped to one client session."""

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the value stored under ``key``, or None."""

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, creating the session if needed."""

    @abstractmethod
    async def invalidate(self) -> None:
        """Destroy the session. Safe to call when there is none."""

    async def cycle_key(self) -> None:
        """Move the current data to a new key. No-op for stores without keys."""


class ServerSideSession(SessionStore):
    """SessionStore backed by a SessionRepository.

    An unknown or expired incoming key is ignored: the server issues a fresh
    random key on the first write instead of adopting the client's value.
    Every write slides the expiry forward by ``max_age``.
    """

    def __init__(
        self,
        repository: SessionRepository,
        session_key: str | None,
        max_age: timedelta,
    ):
        self._repository = repository
        self._incoming_key = session_key
        self._max_age = max_age
        self._key: str | None = None
        self._data: dict[str, Any] = {}
        self._loaded = False
        self._issued = False
        self._modified = False
        self._invalidated = False

    @property
    def key(self) -> str | None:
        """The key the client should hold after this request, if any."""
        return self._key

    @property
    def issued(self) -> bool:
        """True when a new key was generated during this request."""
        return self._issued

    @property
    def modified(self) -> bool:
        return self._modified

    @property
    def invalidated(self) -> bool:
        return self._invalidated

    async def _load(self) -> dict[str, Any]:
        if self._loaded:
            return self._data

        self._loaded = True
        if self._incoming_key:
            record = await self._repository.find_valid(
                hash_session_key(self._incoming_key),
            )
            if record is not None:
                self._key = self._incoming_key
                self._data = dict(record.data)
        return self._data

    async def get(self, key: str) -> Any | None:
        data = await self._load()
        return data.get(key)

    async def set(self, key: str, value: Any) -> None:
        data = await self._load()
        data[key] = value

        if self._key is None:
            self._key = secrets.token_urlsafe(SESSION_KEY_BYTES)
            self._issued = True
            self._invalidated = False
            logger.debug("Issued new session")

        await self._repository.save(
            hash_session_key(self._key),
            data,
            utc_now() + self._max_age,
        )
        self._modified = True

    async def cycle_key(self) -> None:
        """Replace the session key, keeping the data.

        The old record is deleted, so a key known before a privilege change
        (such as sign-in) stops working. Without a live session the next
        write issues a fresh key anyway.
        """
        data = await self._load()
        if self._key is None:
            return

        await self._repository.delete(hash_session_key(self._key))
        self._key = secrets.token_urlsafe(SESSION_KEY_BYTES)
        self._issued = True
        self._invalidated = False
        await self._repository.save(
            hash_session_key(self._key),
            data,
            utc_now() + self._max_age,
        )
        self._modified = True
        logger.debug("Cycled session key")

    async def invalidate(self) -> None:
        await self._load()

        # Also drop an expired record the client may still point at
        stale_key = self._key or self._incoming_key
        if stale_key:
            await self._repository.delete(hash_session_key(stale_key))

        self._key = None
        self._data = {}
        self._issued = False
        self._modified = False
        self._invalidated = True
