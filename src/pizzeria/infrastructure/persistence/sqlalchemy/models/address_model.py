"""SQLAlchemy model for customer addresses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pizzeria.infrastructure.persistence.sqlalchemy.models.base import Base

if TYPE_CHECKING:
    from pizzeria.infrastructure.persistence.sqlalchemy.models.customer_model import (
        CustomerModel,
    )


class AddressModel(Base):
    """Postal address, one per customer. Deleted with its customer."""

    __tablename__ = "addresses"

    address_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    customer_id: Mapped[int] = mapped_column(
        ForeignKey("customers.customer_id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    street_addr_1: Mapped[str] = mapped_column(String(255), nullable=False)
    street_addr_2: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    city: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    state: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    # String keeps leading zeros
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False, default="")

    # Relationships
    customer: Mapped["CustomerModel"] = relationship(
        "CustomerModel",
        back_populates="address",
    )

    def __repr__(self) -> str:
        return (
            f"<AddressModel(address_id={self.address_id}, "
            f"customer_id={self.customer_id})>"
        )
