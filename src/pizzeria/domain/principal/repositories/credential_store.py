"""Credential store interface shared by customers and workers."""

from abc import ABC, abstractmethod

from pizzeria.domain.principal.aggregates import Principal


class CredentialStore(ABC):
    """Lookup of sign-in principals by identifier (their email).

    The identifier is matched exactly as stored; no case folding.
    """

    @abstractmethod
    async def find_by_identifier(self, identifier: str) -> Principal | None:
        """Find the principal registered under ``identifier``."""
