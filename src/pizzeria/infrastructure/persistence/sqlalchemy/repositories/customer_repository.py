"""SQLAlchemy implementation of CustomerRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pizzeria.domain.principal import (
    Address,
    Customer,
    CustomerRepository,
    EmailAlreadyExistsError,
)
from pizzeria.infrastructure.persistence.sqlalchemy.models import (
    AddressModel,
    CustomerModel,
)

logger = logging.getLogger(__name__)


class CustomerRepositorySQLAlchemy(CustomerRepository):
    """SQLAlchemy implementation of the CustomerRepository interface.

    Writes are flushed, never committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_identifier(self, identifier: str) -> Customer | None:
        model = await self._find_model_by_email(identifier)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(CustomerModel.customer_id).where(CustomerModel.email == email)
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def create(self, customer: Customer, address: Address) -> int:
        model = CustomerModel(
            email=customer.email,
            first_name=customer.first_name,
            last_name=customer.last_name,
            phone_number=customer.phone_number,
            password_hash=customer.password_hash,
        )
        try:
            self._session.add(model)
            # Flush first so the address can reference the generated id
            await self._session.flush()

            self._session.add(
                AddressModel(
                    customer_id=model.customer_id,
                    street_addr_1=address.address1,
                    street_addr_2=address.address2,
                    city=address.city,
                    state=address.state,
                    zip_code=address.zip,
                ),
            )
            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(customer.email) from e
            raise

        logger.info(
            "Created customer: %s (email: %s)",
            model.customer_id,
            customer.email,
        )
        return model.customer_id

    async def _find_model_by_email(self, email: str) -> CustomerModel | None:
        stmt = select(CustomerModel).where(CustomerModel.email == email)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: CustomerModel) -> Customer:
        address = None
        if model.address is not None:
            address = Address(
                address1=model.address.street_addr_1,
                address2=model.address.street_addr_2,
                city=model.address.city,
                state=model.address.state,
                zip=model.address.zip_code,
            )
        return Customer.reconstitute(
            id=model.customer_id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            password_hash=model.password_hash,
            phone_number=model.phone_number,
            address=address,
        )
