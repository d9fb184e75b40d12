"""Order repository protocol.

Orders are persisted as an aggregate: the order row plus its item rows are
always written and read together.
"""

from typing import Protocol

from storefront.domain.entities.order import Order


class OrderRepository(Protocol):
    """Protocol for order persistence operations.

    **Implementation Notes**:
    - update() must remove items no longer on the order, upsert the rest,
      and rewrite the stored total, all in one transaction
    """

    async def create(self, order: Order) -> None:
        """Persist a new order together with its items."""
        ...

    async def update(self, order: Order) -> None:
        """Persist changes to an existing order and its items.

        Raises:
            LookupError: If no order with this id exists.
        """
        ...

    async def find(self, order_id: str) -> Order | None:
        """Find order by ID, items included (None if missing)."""
        ...

    async def find_all(self) -> list[Order]:
        """List all orders, items included."""
        ...
