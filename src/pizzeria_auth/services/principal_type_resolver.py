"""Classify login identifiers into principal types by email domain."""

from enum import Enum


class PrincipalType(str, Enum):
    """Which credential store an identifier belongs to."""

    WORKER = "WORKER"
    CUSTOMER = "CUSTOMER"
    UNKNOWN = "UNKNOWN"


class PrincipalTypeResolver:
    """Route an identifier to workers or customers.

    An identifier whose domain equals the company domain (ignoring case)
    is a worker; any other email-like identifier is a customer. The domain
    is everything after the *first* ``@``, so ``a@b@company.com`` is
    compared as ``b@company.com`` and resolves to a customer.

    Examples
    --------
    >>> resolver = PrincipalTypeResolver("work.com")
    >>> resolver.resolve("jane@gmail.com")
    <PrincipalType.CUSTOMER: 'CUSTOMER'>
    >>> resolver.resolve("sam@Work.COM")
    <PrincipalType.WORKER: 'WORKER'>
    >>> resolver.resolve("not-an-email")
    <PrincipalType.UNKNOWN: 'UNKNOWN'>
    """

    def __init__(self, company_email_domain: str):
        self._company_domain = company_email_domain.lower()

    @property
    def company_domain(self) -> str:
        return self._company_domain

    def resolve(self, identifier: str | None) -> PrincipalType:
        if not identifier or "@" not in identifier:
            return PrincipalType.UNKNOWN

        _, _, domain = identifier.partition("@")
        if domain.lower() == self._company_domain:
            return PrincipalType.WORKER
        return PrincipalType.CUSTOMER
