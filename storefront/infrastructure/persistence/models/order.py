"""Order and order item database models.

An order owns its items: items are loaded with the order and removed from
the database when dropped from OrderModel.items (delete-orphan).
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.infrastructure.persistence.base import BaseMutableModel


class OrderModel(BaseMutableModel):
    """Order model.

    Fields:
        id: Order identifier (from BaseMutableModel)
        customer_id: FK to customers.id
        total: Order total at last write (denormalized, NUMERIC(19, 4))
        items: Order items, ordered by position
    """

    __tablename__ = "orders"

    customer_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("customers.id"),
        nullable=False,
        index=True,
    )
    total: Mapped[Decimal] = mapped_column(Numeric(precision=19, scale=4), nullable=False)

    items: Mapped[list["OrderItemModel"]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
    )

    def __repr__(self) -> str:
        return f"<OrderModel(id={self.id!r}, customer_id={self.customer_id!r}, total={self.total})>"


class OrderItemModel(BaseMutableModel):
    """Order item model.

    Fields:
        id: Item identifier (from BaseMutableModel)
        order_id: FK to orders.id (cascade delete)
        product_id: FK to products.id
        name: Product name at time of purchase
        price: Unit price at time of purchase
        quantity: Number of units
        position: Index of the item within the order (preserves ordering)
    """

    __tablename__ = "order_items"

    order_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("products.id"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(precision=19, scale=4), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    order: Mapped[OrderModel] = relationship(back_populates="items")
