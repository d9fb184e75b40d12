"""Domain Events Registry - Single Source of Truth.

This registry catalogs ALL domain events in the system with their metadata.
Used for:
- Container wiring (automated subscription in create_event_dispatcher)
- Validation tests (verify every event has the handlers it requires)

Adding new events:
1. Define event dataclass in the appropriate *_events.py file
2. Add entry to EVENT_REGISTRY below
3. Run tests - they'll tell you which handler is missing
"""

from dataclasses import dataclass
from enum import Enum

from storefront.domain.events.base_event import DomainEvent
from storefront.domain.events.customer_events import (
    CustomerAddressChanged,
    CustomerCreated,
)
from storefront.domain.events.order_events import OrderPlaced
from storefront.domain.events.product_events import ProductCreated


class EventCategory(str, Enum):
    """Aggregate an event belongs to."""

    CUSTOMER = "customer"
    PRODUCT = "product"
    ORDER = "order"


@dataclass(frozen=True, kw_only=True)
class EventMetadata:
    """Metadata for one domain event kind.

    Attributes:
        event_class: The DomainEvent subclass (dispatcher registry key).
        category: Aggregate the event belongs to.
        requires_logging: Wire a logging handler for this event.
        requires_email: Wire an email notification handler for this event.
    """

    event_class: type[DomainEvent]
    category: EventCategory
    requires_logging: bool = True
    requires_email: bool = False


EVENT_REGISTRY: list[EventMetadata] = [
    EventMetadata(
        event_class=CustomerCreated,
        category=EventCategory.CUSTOMER,
        requires_email=True,
    ),
    EventMetadata(
        event_class=CustomerAddressChanged,
        category=EventCategory.CUSTOMER,
    ),
    EventMetadata(
        event_class=ProductCreated,
        category=EventCategory.PRODUCT,
        requires_email=True,
    ),
    EventMetadata(
        event_class=OrderPlaced,
        category=EventCategory.ORDER,
    ),
]


def get_events_by_category(category: EventCategory) -> list[type[DomainEvent]]:
    """Return event classes registered under a category, in registry order."""
    return [m.event_class for m in EVENT_REGISTRY if m.category == category]
