from pizzeria.domain.principal.repositories.credential_store import CredentialStore
from pizzeria.domain.principal.repositories.customer_repository import (
    CustomerRepository,
)
from pizzeria.domain.principal.repositories.worker_repository import (
    WorkerRepository,
)

__all__ = [
    "CredentialStore",
    "CustomerRepository",
    "WorkerRepository",
]
