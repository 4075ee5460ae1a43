"""SQLAlchemy model for employees (workers)."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pizzeria.infrastructure.persistence.sqlalchemy.models.base import Base


class EmployeeModel(Base):
    __tablename__ = "employees"

    employee_id: Mapped[int] = mapped_column(
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
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<EmployeeModel(employee_id={self.employee_id}, "
            f"email={self.email}, role={self.role})>"
        )
