from pizzeria.domain.principal.aggregates.customer import CUSTOMER_ROLE, Customer
from pizzeria.domain.principal.aggregates.principal import Principal, PrincipalView
from pizzeria.domain.principal.aggregates.worker import Worker

__all__ = [
    "CUSTOMER_ROLE",
    "Customer",
    "Principal",
    "PrincipalView",
    "Worker",
]
