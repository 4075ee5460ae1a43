"""Customer aggregate."""

from __future__ import annotations

from pizzeria.domain.principal.aggregates.principal import Principal
from pizzeria.domain.principal.value_objects import Address

CUSTOMER_ROLE = "Customer"


class Customer(Principal):
    """A registered customer. Owns at most one Address."""

    def __init__(
        self,
        email: str,
        first_name: str,
        last_name: str,
        password_hash: str,
        phone_number: str = "",
        address: Address | None = None,
        id: int | None = None,
    ):
        super().__init__(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=password_hash,
            id=id,
        )
        self._phone_number = phone_number
        self._address = address

    @property
    def role(self) -> str:
        return CUSTOMER_ROLE

    @property
    def phone_number(self) -> str:
        return self._phone_number

    @property
    def address(self) -> Address | None:
        return self._address

    @classmethod
    def create(
        cls,
        email: str,
        first_name: str,
        last_name: str,
        password_hash: str,
        phone_number: str = "",
        address: Address | None = None,
    ) -> Customer:
        return cls(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=password_hash,
            phone_number=phone_number,
            address=address,
        )

    @classmethod
    def reconstitute(
        cls,
        id: int,
        email: str,
        first_name: str,
        last_name: str,
        password_hash: str,
        phone_number: str,
        address: Address | None = None,
    ) -> Customer:
        return cls(
            id=id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=password_hash,
            phone_number=phone_number,
            address=address,
        )
