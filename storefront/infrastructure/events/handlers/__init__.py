"""Event handlers subscribed to the dispatcher by the container."""

from storefront.infrastructure.events.handlers.email_event_handlers import (
    CustomerCreatedWelcomeEmailHandler,
    ProductCreatedEmailHandler,
)
from storefront.infrastructure.events.handlers.logging_event_handlers import (
    CustomerAddressChangedLoggingHandler,
    CustomerCreatedLoggingHandler,
    OrderPlacedLoggingHandler,
    ProductCreatedLoggingHandler,
)

__all__ = [
    "CustomerAddressChangedLoggingHandler",
    "CustomerCreatedLoggingHandler",
    "CustomerCreatedWelcomeEmailHandler",
    "OrderPlacedLoggingHandler",
    "ProductCreatedEmailHandler",
    "ProductCreatedLoggingHandler",
]
