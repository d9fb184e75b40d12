"""Order domain events."""

from dataclasses import dataclass

from storefront.domain.entities.order import Order
from storefront.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class OrderPlaced(DomainEvent):
    """An order was placed and persisted.

    Attributes:
        order: The placed order.
    """

    order: Order
