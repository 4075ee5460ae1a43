"""Unit tests for ServerSideSession."""

from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from pizzeria_auth.sessions import (
    ServerSideSession,
    SessionRecord,
    SessionRepository,
    hash_session_key,
)

MAX_AGE = timedelta(minutes=30)


class InMemorySessionRepository(SessionRepository):
    """Dict-backed repository; records keyed by hash like the real one."""

    def __init__(self) -> None:
        self.records: dict[str, SessionRecord] = {}

    async def find_valid(self, key_hash: str) -> SessionRecord | None:
        record = self.records.get(key_hash)
        if record is None or record.is_expired(datetime.now(tz=timezone.utc)):
            return None
        return record

    async def save(
        self,
        key_hash: str,
        data: dict[str, Any],
        expires_at: datetime,
    ) -> None:
        self.records[key_hash] = SessionRecord(key_hash, dict(data), expires_at)

    async def delete(self, key_hash: str) -> bool:
        return self.records.pop(key_hash, None) is not None

    async def purge_expired(self) -> int:
        now = datetime.now(tz=timezone.utc)
        expired = [k for k, r in self.records.items() if r.is_expired(now)]
        for key_hash in expired:
            del self.records[key_hash]
        return len(expired)


@pytest.fixture
def repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


class TestHashSessionKey:
    def test_sha256_hex(self):
        digest = hash_session_key("abc")

        assert len(digest) == 64
        assert digest == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )


class TestServerSideSession:
    async def test_new_session_is_empty(self, repository):
        session = ServerSideSession(repository, None, MAX_AGE)

        assert await session.get("userId") is None
        assert session.key is None
        assert session.modified is False

    async def test_first_set_issues_random_key(self, repository):
        session = ServerSideSession(repository, None, MAX_AGE)

        await session.set("userId", 7)

        assert session.key is not None
        assert len(session.key) >= 43
        assert session.issued is True
        assert session.modified is True
        assert await session.get("userId") == 7

    async def test_only_hash_is_persisted(self, repository):
        session = ServerSideSession(repository, None, MAX_AGE)
        await session.set("userId", 7)

        assert session.key not in repository.records
        assert hash_session_key(session.key) in repository.records

    async def test_set_slides_expiry(self, repository):
        session = ServerSideSession(repository, None, MAX_AGE)
        before = datetime.now(tz=timezone.utc)

        await session.set("role", "Customer")

        record = repository.records[hash_session_key(session.key)]
        assert before + MAX_AGE <= record.expires_at
        assert record.expires_at <= datetime.now(tz=timezone.utc) + MAX_AGE

    async def test_existing_key_is_loaded(self, repository):
        first = ServerSideSession(repository, None, MAX_AGE)
        await first.set("userId", 7)
        await first.set("email", "jane@gmail.com")

        second = ServerSideSession(repository, first.key, MAX_AGE)

        assert await second.get("userId") == 7
        assert await second.get("email") == "jane@gmail.com"
        assert second.key == first.key
        assert second.issued is False

    async def test_unknown_key_is_not_adopted(self, repository):
        session = ServerSideSession(repository, "client-chosen-value", MAX_AGE)

        await session.set("userId", 7)

        assert session.key != "client-chosen-value"
        assert session.issued is True

    async def test_expired_session_is_ignored(self, repository):
        repository.records[hash_session_key("old")] = SessionRecord(
            key_hash=hash_session_key("old"),
            data={"userId": 7},
            expires_at=datetime.now(tz=timezone.utc) - timedelta(seconds=1),
        )

        session = ServerSideSession(repository, "old", MAX_AGE)

        assert await session.get("userId") is None
        assert session.key is None

    async def test_invalidate_deletes_record(self, repository):
        first = ServerSideSession(repository, None, MAX_AGE)
        await first.set("userId", 7)

        session = ServerSideSession(repository, first.key, MAX_AGE)
        await session.invalidate()

        assert repository.records == {}
        assert session.invalidated is True
        assert session.key is None
        assert await session.get("userId") is None

    async def test_invalidate_without_session_is_noop(self, repository):
        session = ServerSideSession(repository, None, MAX_AGE)

        await session.invalidate()
        await session.invalidate()

        assert session.invalidated is True

    async def test_set_after_invalidate_issues_new_key(self, repository):
        session = ServerSideSession(repository, None, MAX_AGE)
        await session.set("userId", 7)
        old_key = session.key

        await session.invalidate()
        await session.set("userId", 8)

        assert session.key != old_key
        assert session.invalidated is False
        assert hash_session_key(old_key) not in repository.records


    async def test_cycle_key_moves_data_to_new_key(self, repository):
        first = ServerSideSession(repository, None, MAX_AGE)
        await first.set("cart", 3)
        old_key = first.key

        session = ServerSideSession(repository, old_key, MAX_AGE)
        await session.cycle_key()

        assert session.key != old_key
        assert session.issued is True
        assert session.modified is True
        assert hash_session_key(old_key) not in repository.records
        assert repository.records[hash_session_key(session.key)].data == {
            "cart": 3,
        }

    async def test_old_key_is_dead_after_cycle(self, repository):
        first = ServerSideSession(repository, None, MAX_AGE)
        await first.set("userId", 7)
        old_key = first.key

        await ServerSideSession(repository, old_key, MAX_AGE).cycle_key()
        replay = ServerSideSession(repository, old_key, MAX_AGE)

        assert await replay.get("userId") is None
        assert replay.key is None

    async def test_cycle_key_without_session_is_noop(self, repository):
        session = ServerSideSession(repository, "unknown", MAX_AGE)

        await session.cycle_key()

        assert session.key is None
        assert session.modified is False
        assert repository.records == {}

    async def test_set_after_cycle_keeps_new_key(self, repository):
        first = ServerSideSession(repository, None, MAX_AGE)
        await first.set("userId", 7)

        session = ServerSideSession(repository, first.key, MAX_AGE)
        await session.cycle_key()
        cycled = session.key
        await session.set("userId", 8)

        assert session.key == cycled
        assert list(repository.records) == [hash_session_key(cycled)]

class TestSessionRecord:
    def test_is_expired_at_boundary(self):
        now = datetime.now(tz=timezone.utc)
        record = SessionRecord("h", {}, now)

        assert record.is_expired(now) is True
        assert record.is_expired(now - timedelta(seconds=1)) is False
