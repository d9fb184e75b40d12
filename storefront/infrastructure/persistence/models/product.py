"""Product database model."""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.persistence.base import BaseMutableModel


class ProductModel(BaseMutableModel):
    """Product model.

    Fields:
        id: Product identifier (from BaseMutableModel)
        name: Product name
        price: Unit price (NUMERIC(19, 4))
    """

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(precision=19, scale=4), nullable=False)

    def __repr__(self) -> str:
        return f"<ProductModel(id={self.id!r}, name={self.name!r}, price={self.price})>"
