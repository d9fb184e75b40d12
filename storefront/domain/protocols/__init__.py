"""Domain protocols (ports).

Structural interfaces the domain depends on; infrastructure provides the
adapters.
"""

from storefront.domain.protocols.customer_repository import CustomerRepository
from storefront.domain.protocols.event_dispatcher_protocol import (
    EventDispatcherProtocol,
    EventHandler,
)
from storefront.domain.protocols.logger_protocol import LoggerProtocol
from storefront.domain.protocols.order_repository import OrderRepository
from storefront.domain.protocols.product_repository import ProductRepository

__all__ = [
    "CustomerRepository",
    "EventDispatcherProtocol",
    "EventHandler",
    "LoggerProtocol",
    "OrderRepository",
    "ProductRepository",
]
