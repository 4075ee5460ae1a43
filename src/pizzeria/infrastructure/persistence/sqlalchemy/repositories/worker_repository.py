"""SQLAlchemy implementation of WorkerRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pizzeria.domain.principal import (
    EmailAlreadyExistsError,
    Worker,
    WorkerRepository,
)
from pizzeria.infrastructure.persistence.sqlalchemy.models import EmployeeModel

logger = logging.getLogger(__name__)


class WorkerRepositorySQLAlchemy(WorkerRepository):
    """SQLAlchemy implementation of the WorkerRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_identifier(self, identifier: str) -> Worker | None:
        stmt = select(EmployeeModel).where(EmployeeModel.email == identifier)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return Worker.reconstitute(
            id=model.employee_id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            password_hash=model.password_hash,
            role=model.role,
        )

    async def add(self, worker: Worker) -> int:
        model = EmployeeModel(
            email=worker.email,
            first_name=worker.first_name,
            last_name=worker.last_name,
            password_hash=worker.password_hash,
            role=worker.role,
        )
        try:
            self._session.add(model)
            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(worker.email) from e
            raise

        logger.info(
            "Created worker: %s (email: %s, role: %s)",
            model.employee_id,
            worker.email,
            worker.role,
        )
        return model.employee_id
