"""SQLAlchemy model for customers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pizzeria.infrastructure.persistence.sqlalchemy.models.base import Base

if TYPE_CHECKING:
    from pizzeria.infrastructure.persistence.sqlalchemy.models.address_model import (
        AddressModel,
    )


class CustomerModel(Base):
    __tablename__ = "customers"

    customer_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    address: Mapped["AddressModel"] = relationship(
        "AddressModel",
        back_populates="customer",
        cascade="all, delete-orphan",
        passive_deletes=True,
        uselist=False,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<CustomerModel(customer_id={self.customer_id}, email={self.email})>"
