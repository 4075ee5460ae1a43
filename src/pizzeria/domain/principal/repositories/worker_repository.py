"""Worker repository interface."""

from abc import abstractmethod

from pizzeria.domain.principal.aggregates import Worker
from pizzeria.domain.principal.repositories.credential_store import CredentialStore


class WorkerRepository(CredentialStore):
    """Repository interface for Worker aggregates."""

    @abstractmethod
    async def find_by_identifier(self, identifier: str) -> Worker | None:
        """Find a worker by email."""

    @abstractmethod
    async def add(self, worker: Worker) -> int:
        """Persist a new worker and return its id.

        Raises
        ------
        EmailAlreadyExistsError
            If the email is already taken
        """
