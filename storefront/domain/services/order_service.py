"""Order domain service.

Placing an order touches two aggregates (Order and Customer), so it lives
in a stateless domain service rather than on either entity.
"""

from decimal import ROUND_DOWN, Decimal

from storefront.domain.entities.customer import Customer
from storefront.domain.entities.order import Order, OrderItem


class OrderService:
    """Stateless operations on orders."""

    @staticmethod
    def place_order(customer: Customer, items: list[OrderItem], order_id: str) -> Order:
        """Create an order for a customer and grant reward points.

        The customer earns half of the order total in reward points,
        rounded down to a whole point.

        Args:
            customer: Customer placing the order (mutated: reward points).
            items: Line items for the new order.
            order_id: Identifier for the new order.

        Returns:
            The new Order.

        Raises:
            ValueError: If items is empty.
        """
        if not items:
            raise ValueError("Order must have at least one item")

        order = Order(id=order_id, customer_id=customer.id, items=list(items))
        points = (order.total() / 2).to_integral_value(rounding=ROUND_DOWN)
        customer.add_reward_points(int(points))
        return order

    @staticmethod
    def total(orders: list[Order]) -> Decimal:
        """Return the sum of totals across orders."""
        return sum((order.total() for order in orders), Decimal("0"))
