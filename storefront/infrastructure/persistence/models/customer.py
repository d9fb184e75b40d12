"""Customer database model.

The Address value object is flattened into nullable columns; a customer
without an address has all four columns NULL.
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.persistence.base import BaseMutableModel


class CustomerModel(BaseMutableModel):
    """Customer model.

    Fields:
        id: Customer identifier (from BaseMutableModel)
        name: Display name
        street, number, zip_code, city: Flattened Address (nullable)
        active: Whether the customer is active
        reward_points: Accumulated loyalty points
    """

    __tablename__ = "customers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    reward_points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<CustomerModel(id={self.id!r}, name={self.name!r}, active={self.active})>"
