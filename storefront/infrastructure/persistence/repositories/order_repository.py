"""Order repository implementation.

SQLAlchemy implementation of the OrderRepository protocol. Orders and their
items are persisted as one aggregate.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.domain.entities.order import Order, OrderItem
from storefront.infrastructure.persistence.models.order import (
    OrderItemModel,
    OrderModel,
)


class OrderRepository:
    """SQLAlchemy implementation of OrderRepository protocol.

    **Implementation Notes**:
    - Items are always eager-loaded (selectinload); async sessions cannot
      lazy-load relationships
    - The stored total is recomputed from the entity on every write
    - Item position is the item's index in Order.items
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(self, order: Order) -> None:
        """Persist a new order together with its items.

        Args:
            order: Order entity to insert.
        """
        model = OrderModel(
            id=order.id,
            customer_id=order.customer_id,
            total=order.total(),
            items=[
                self._to_item_model(order.id, item, position)
                for position, item in enumerate(order.items)
            ],
        )
        self._session.add(model)
        await self._session.flush()

    async def update(self, order: Order) -> None:
        """Persist changes to an existing order and its items.

        Items missing from the entity are deleted, known items are updated
        in place and new items are inserted. The order's customer and total
        are rewritten.

        Args:
            order: Order entity with new state.

        Raises:
            LookupError: If the order does not exist.
        """
        model = await self._get_model(order.id)
        if model is None:
            raise LookupError(f"Order not found: {order.id}")

        existing = {item.id: item for item in model.items}
        items: list[OrderItemModel] = []
        for position, item in enumerate(order.items):
            item_model = existing.get(item.id)
            if item_model is None:
                item_model = self._to_item_model(order.id, item, position)
            else:
                item_model.name = item.name
                item_model.price = item.price
                item_model.product_id = item.product_id
                item_model.quantity = item.quantity
                item_model.position = position
            items.append(item_model)

        # delete-orphan cascade removes items no longer on the order
        model.items = items
        model.customer_id = order.customer_id
        model.total = order.total()

        await self._session.flush()

    async def find(self, order_id: str) -> Order | None:
        """Find order by ID, items included.

        Args:
            order_id: Order identifier.

        Returns:
            Order entity if found, None otherwise.
        """
        model = await self._get_model(order_id)
        if model is None:
            return None

        return self._to_entity(model)

    async def find_all(self) -> list[Order]:
        """List all orders by creation time, then id, items included."""
        stmt = (
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .order_by(OrderModel.created_at, OrderModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def _get_model(self, order_id: str) -> OrderModel | None:
        stmt = (
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: OrderModel) -> Order:
        """Map database model (with items) to domain aggregate."""
        return Order(
            id=model.id,
            customer_id=model.customer_id,
            items=[
                OrderItem(
                    id=item.id,
                    name=item.name,
                    price=item.price,
                    product_id=item.product_id,
                    quantity=item.quantity,
                )
                for item in model.items
            ],
        )

    @staticmethod
    def _to_item_model(order_id: str, item: OrderItem, position: int) -> OrderItemModel:
        return OrderItemModel(
            id=item.id,
            order_id=order_id,
            product_id=item.product_id,
            name=item.name,
            price=item.price,
            quantity=item.quantity,
            position=position,
        )
