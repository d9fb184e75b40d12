"""Order aggregate (Order + OrderItem).

An order belongs to one customer and holds at least one item. Items are
only changed through the order (change_items), which re-validates the
aggregate.

Usage:
    from decimal import Decimal
    from storefront.domain.entities import Order, OrderItem

    item = OrderItem(
        id="i1", name="Product 1", price=Decimal("10"), product_id="p1", quantity=2
    )
    order = Order(id="o1", customer_id="c1", items=[item])
    order.total()  # Decimal('20')
"""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class OrderItem:
    """Line item of an order.

    Attributes:
        id: Unique item identifier.
        name: Product name at time of purchase.
        price: Unit price at time of purchase.
        product_id: Product this item refers to.
        quantity: Number of units (positive).
    """

    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        """Validate item after initialization.

        Raises:
            ValueError: If quantity is not positive or price is negative.
        """
        if not self.id:
            raise ValueError("Id is required")
        if self.quantity <= 0:
            raise ValueError("Quantity must be greater than zero")
        if self.price < 0:
            raise ValueError("Price must be greater or equal to zero")

    def total(self) -> Decimal:
        """Return price multiplied by quantity."""
        return self.price * self.quantity


@dataclass
class Order:
    """Order aggregate root.

    Attributes:
        id: Unique order identifier.
        customer_id: Customer who placed the order.
        items: Line items (at least one).
    """

    id: str
    customer_id: str
    items: list[OrderItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate order after initialization.

        Raises:
            ValueError: If id or customer_id is empty, or there are no items.
        """
        self._validate()

    def _validate(self) -> None:
        if not self.id:
            raise ValueError("Id is required")
        if not self.customer_id:
            raise ValueError("CustomerId is required")
        if not self.items:
            raise ValueError("Items are required")

    def total(self) -> Decimal:
        """Return the sum of all item totals."""
        return sum((item.total() for item in self.items), Decimal("0"))

    def change_items(self, items: list[OrderItem]) -> None:
        """Replace the order's items.

        Raises:
            ValueError: If items is empty (the order keeps its previous items).
        """
        if not items:
            raise ValueError("Items are required")
        self.items = list(items)
