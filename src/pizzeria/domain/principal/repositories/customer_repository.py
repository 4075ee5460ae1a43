"""Customer repository interface."""

from abc import abstractmethod

from pizzeria.domain.principal.aggregates import Customer
from pizzeria.domain.principal.repositories.credential_store import CredentialStore
from pizzeria.domain.principal.value_objects import Address


class CustomerRepository(CredentialStore):
    """Repository interface for Customer aggregates."""

    @abstractmethod
    async def find_by_identifier(self, identifier: str) -> Customer | None:
        """Find a customer by email."""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if a customer exists with the given email."""

    @abstractmethod
    async def create(self, customer: Customer, address: Address) -> int:
        """Persist a new customer together with its address.

        Both rows are written in the caller's unit of work; nothing is
        committed here.

        Returns
        -------
        The store-assigned customer id

        Raises
        ------
        EmailAlreadyExistsError
            If the email is already taken
        """
