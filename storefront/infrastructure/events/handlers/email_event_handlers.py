"""Email event handler stubs for domain events.

STUB handlers that log when an email would be sent. They give the wiring
(registry flag requires_email, container subscription) a real target until
an email service exists.

Email Templates (future):
    - welcome_email: Sent after CustomerCreated
    - new_product_email: Sent after ProductCreated (catalogue announcement)
"""

from storefront.core.config import Settings
from storefront.domain.events.customer_events import CustomerCreated
from storefront.domain.events.product_events import ProductCreated
from storefront.domain.protocols.logger_protocol import LoggerProtocol


class CustomerCreatedWelcomeEmailHandler:
    """Send welcome email to a new customer (STUB).

    Attributes:
        _logger: Logger protocol implementation (from container).
        _settings: Application settings (app name used in subject line).
    """

    def __init__(self, logger: LoggerProtocol, settings: Settings) -> None:
        self._logger = logger
        self._settings = settings

    def handle(self, event: CustomerCreated) -> None:
        """Log that the welcome email would be sent."""
        self._logger.info(
            "email_would_be_sent",
            template="welcome_email",
            customer_id=event.customer.id,
            event_id=str(event.event_id),
            subject=f"Welcome to {self._settings.app_name}!",
        )


class ProductCreatedEmailHandler:
    """Announce a new product by email (STUB)."""

    def __init__(self, logger: LoggerProtocol, settings: Settings) -> None:
        self._logger = logger
        self._settings = settings

    def handle(self, event: ProductCreated) -> None:
        """Log that the new-product email would be sent."""
        self._logger.info(
            "email_would_be_sent",
            template="new_product_email",
            product_id=event.product.id,
            event_id=str(event.event_id),
            subject=f"New at {self._settings.app_name}: {event.product.name}",
        )
