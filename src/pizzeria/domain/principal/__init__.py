"""Principal domain: the two kinds of accounts that can sign in.

This domain handles:
- Customer aggregate (self-registered, owns an Address)
- Worker aggregate (provisioned by operators, carries a role)
- Credential store interfaces, one per principal kind
"""

from pizzeria.domain.principal.aggregates import (
    CUSTOMER_ROLE,
    Customer,
    Principal,
    PrincipalView,
    Worker,
)
from pizzeria.domain.principal.exceptions import EmailAlreadyExistsError
from pizzeria.domain.principal.repositories import (
    CredentialStore,
    CustomerRepository,
    WorkerRepository,
)
from pizzeria.domain.principal.value_objects import Address

__all__ = [
    "CUSTOMER_ROLE",
    "Address",
    "CredentialStore",
    "Customer",
    "CustomerRepository",
    "EmailAlreadyExistsError",
    "Principal",
    "PrincipalView",
    "Worker",
    "WorkerRepository",
]
