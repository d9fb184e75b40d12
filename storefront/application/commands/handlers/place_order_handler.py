"""PlaceOrder command handler.

Builds order items from current product data, places the order through
OrderService (which grants reward points), persists both the order and the
customer, then notifies OrderPlaced.

Reference:
    - storefront.domain.services.order_service
"""

from typing import cast

from uuid_extensions import uuid7

from storefront.application.commands.order_commands import PlaceOrder
from storefront.core.enums import ErrorCode
from storefront.core.errors import DomainError, NotFoundError, ValidationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities.order import Order, OrderItem
from storefront.domain.events.order_events import OrderPlaced
from storefront.domain.protocols.customer_repository import CustomerRepository
from storefront.domain.protocols.event_dispatcher_protocol import (
    EventDispatcherProtocol,
)
from storefront.domain.protocols.order_repository import OrderRepository
from storefront.domain.protocols.product_repository import ProductRepository
from storefront.domain.services.order_service import OrderService


class PlaceOrderHandler:
    """Handler for PlaceOrder command.

    Dependencies (injected via constructor):
        - CustomerRepository: Load customer, persist reward points
        - ProductRepository: Resolve product name and price
        - OrderRepository: Persist the order
        - EventDispatcherProtocol: For domain events

    The repositories are expected to share one session so the order and
    the customer's reward points commit together.
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        event_dispatcher: EventDispatcherProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: PlaceOrder) -> Result[Order, DomainError]:
        """Handle PlaceOrder command.

        Args:
            cmd: PlaceOrder command with customer and requested items.

        Returns:
            Success(Order): Order placed.
            Failure(ValidationError): No items or invalid quantity.
            Failure(NotFoundError): Customer or a product does not exist.
        """
        if not cmd.items:
            return cast(
                Result[Order, DomainError],
                Failure(
                    error=ValidationError(
                        code=ErrorCode.ORDER_WITHOUT_ITEMS,
                        message="Order must have at least one item",
                        field="items",
                    )
                ),
            )

        customer = await self._customer_repo.find(cmd.customer_id)
        if customer is None:
            return cast(
                Result[Order, DomainError],
                Failure(
                    error=NotFoundError(
                        code=ErrorCode.CUSTOMER_NOT_FOUND,
                        message="Customer not found",
                        resource_type="Customer",
                        resource_id=cmd.customer_id,
                    )
                ),
            )

        items: list[OrderItem] = []
        for requested in cmd.items:
            product = await self._product_repo.find(requested.product_id)
            if product is None:
                return cast(
                    Result[Order, DomainError],
                    Failure(
                        error=NotFoundError(
                            code=ErrorCode.PRODUCT_NOT_FOUND,
                            message="Product not found",
                            resource_type="Product",
                            resource_id=requested.product_id,
                        )
                    ),
                )

            try:
                items.append(
                    OrderItem(
                        id=str(uuid7()),
                        name=product.name,
                        price=product.price,
                        product_id=product.id,
                        quantity=requested.quantity,
                    )
                )
            except ValueError as e:
                return cast(
                    Result[Order, DomainError],
                    Failure(
                        error=ValidationError(
                            code=ErrorCode.INVALID_QUANTITY,
                            message=str(e),
                            field="quantity",
                        )
                    ),
                )

        order = OrderService.place_order(
            customer, items, order_id=cmd.order_id or str(uuid7())
        )

        await self._order_repo.create(order)
        await self._customer_repo.update(customer)

        self._event_dispatcher.notify(OrderPlaced(order=order))

        return Success(value=order)
