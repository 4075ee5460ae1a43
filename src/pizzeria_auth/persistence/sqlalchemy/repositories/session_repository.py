"""SQLAlchemy implementation of SessionRepository."""

from datetime import datetime
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from pizzeria.domain.shared.time import ensure_tz_aware, utc_now
from pizzeria_auth.persistence.sqlalchemy.models import SessionModel
from pizzeria_auth.sessions import SessionRecord, SessionRepository


class SessionRepositorySQLAlchemy(SessionRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_valid(self, key_hash: str) -> SessionRecord | None:
        model = await self._find_model(key_hash)
        if model is None:
            return None

        record = SessionRecord(
            key_hash=model.session_key_hash,
            data=dict(model.data or {}),
            expires_at=ensure_tz_aware(model.expires_at),
        )
        if record.is_expired(utc_now()):
            return None
        return record

    async def save(
        self,
        key_hash: str,
        data: dict[str, Any],
        expires_at: datetime,
    ) -> None:
        model = await self._find_model(key_hash)
        if model is None:
            model = SessionModel(
                session_key_hash=key_hash,
                data=dict(data),
                expires_at=expires_at,
            )
            self._session.add(model)
        else:
            # Reassign so the JSON column is flagged dirty
            model.data = dict(data)
            model.expires_at = expires_at
        await self._session.flush()

    async def delete(self, key_hash: str) -> bool:
        stmt = delete(SessionModel).where(SessionModel.session_key_hash == key_hash)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)  # type: ignore[attr-defined]

    async def purge_expired(self) -> int:
        stmt = (
            delete(SessionModel)
            .where(SessionModel.expires_at <= utc_now())
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def _find_model(self, key_hash: str) -> SessionModel | None:
        stmt = select(SessionModel).where(SessionModel.session_key_hash == key_hash)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
