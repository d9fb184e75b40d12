"""Order commands (CQRS write operations)."""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class PlaceOrderItem:
    """One requested line of an order.

    Attributes:
        product_id: Product to buy.
        quantity: Number of units.
    """

    product_id: str
    quantity: int


@dataclass(frozen=True, kw_only=True)
class PlaceOrder:
    """Place an order for a customer.

    Name and price of each item are copied from the current product.

    Attributes:
        customer_id: Customer placing the order.
        items: Requested lines (at least one).
        order_id: Explicit identifier; generated (uuid7) when omitted.
    """

    customer_id: str
    items: tuple[PlaceOrderItem, ...] = field(default_factory=tuple)
    order_id: str | None = None
