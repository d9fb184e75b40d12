"""Domain events module.

Usage:
    >>> from storefront.domain.events import CustomerAddressChanged
    >>>
    >>> customer.change_address(address)
    >>> dispatcher.notify(CustomerAddressChanged(customer=customer))
"""

from storefront.domain.events.base_event import DomainEvent
from storefront.domain.events.customer_events import (
    CustomerAddressChanged,
    CustomerCreated,
)
from storefront.domain.events.order_events import OrderPlaced
from storefront.domain.events.product_events import ProductCreated

__all__ = [
    "DomainEvent",
    "CustomerCreated",
    "CustomerAddressChanged",
    "ProductCreated",
    "OrderPlaced",
]
