"""Logging event handlers for domain events.

One handler class per event kind. Each logs a structured INFO line named
after the event (snake_case) with the payload's identifying fields.

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - entity fields (customer_id, product_id, order_id, ...)

Usage:
    >>> handler = CustomerAddressChangedLoggingHandler(logger=get_logger())
    >>> dispatcher.register(CustomerAddressChanged, handler)
"""

from storefront.domain.events.customer_events import (
    CustomerAddressChanged,
    CustomerCreated,
)
from storefront.domain.events.order_events import OrderPlaced
from storefront.domain.events.product_events import ProductCreated
from storefront.domain.protocols.logger_protocol import LoggerProtocol


class CustomerCreatedLoggingHandler:
    """Log customer creation (INFO level)."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, event: CustomerCreated) -> None:
        """Log the new customer's id and name."""
        self._logger.info(
            "customer_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            customer_id=event.customer.id,
            name=event.customer.name,
        )


class CustomerAddressChangedLoggingHandler:
    """Log customer address changes (INFO level).

    Example log output:
        {"event": "customer_address_changed", "customer_id": "c1",
         "name": "Customer 1", "address": "Rua 1, 1, 12345-678 Porto Alegre"}
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, event: CustomerAddressChanged) -> None:
        """Log which customer moved and the new address."""
        customer = event.customer
        self._logger.info(
            "customer_address_changed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            customer_id=customer.id,
            name=customer.name,
            address=str(customer.address) if customer.address else None,
        )


class ProductCreatedLoggingHandler:
    """Log product creation (INFO level)."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, event: ProductCreated) -> None:
        self._logger.info(
            "product_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            product_id=event.product.id,
            name=event.product.name,
            price=str(event.product.price),
        )


class OrderPlacedLoggingHandler:
    """Log placed orders with their total (INFO level)."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, event: OrderPlaced) -> None:
        order = event.order
        self._logger.info(
            "order_placed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            order_id=order.id,
            customer_id=order.customer_id,
            item_count=len(order.items),
            total=str(order.total()),
        )
