"""Event dispatcher factory.

Builds a new, fully wired EventDispatcher. There is no module-level or
cached dispatcher: the caller owns the instance it creates and passes it to
the command handlers that notify.

Handlers are registered from EVENT_REGISTRY: for each event, the
requires_* flags decide which handler kinds are subscribed, in the order
logging -> email.
"""

from typing import TYPE_CHECKING

from storefront.core.config import Settings, get_settings
from storefront.core.container.infrastructure import get_logger
from storefront.domain.events.base_event import DomainEvent
from storefront.domain.events.customer_events import (
    CustomerAddressChanged,
    CustomerCreated,
)
from storefront.domain.events.order_events import OrderPlaced
from storefront.domain.events.product_events import ProductCreated
from storefront.domain.events.registry import EVENT_REGISTRY
from storefront.infrastructure.events.event_dispatcher import EventDispatcher
from storefront.infrastructure.events.handlers import (
    CustomerAddressChangedLoggingHandler,
    CustomerCreatedLoggingHandler,
    CustomerCreatedWelcomeEmailHandler,
    OrderPlacedLoggingHandler,
    ProductCreatedEmailHandler,
    ProductCreatedLoggingHandler,
)

if TYPE_CHECKING:
    from storefront.domain.protocols.event_dispatcher_protocol import EventHandler
    from storefront.domain.protocols.logger_protocol import LoggerProtocol


def _logging_handlers(logger: "LoggerProtocol") -> dict[type[DomainEvent], "EventHandler"]:
    return {
        CustomerCreated: CustomerCreatedLoggingHandler(logger=logger),
        CustomerAddressChanged: CustomerAddressChangedLoggingHandler(logger=logger),
        ProductCreated: ProductCreatedLoggingHandler(logger=logger),
        OrderPlaced: OrderPlacedLoggingHandler(logger=logger),
    }


def _email_handlers(
    logger: "LoggerProtocol", settings: Settings
) -> dict[type[DomainEvent], "EventHandler"]:
    return {
        CustomerCreated: CustomerCreatedWelcomeEmailHandler(logger=logger, settings=settings),
        ProductCreated: ProductCreatedEmailHandler(logger=logger, settings=settings),
    }


def create_event_dispatcher(
    logger: "LoggerProtocol | None" = None,
    settings: Settings | None = None,
) -> EventDispatcher:
    """Create an event dispatcher with every registry subscription wired.

    Args:
        logger: Logger for the dispatcher and its handlers (container
            logger when omitted).
        settings: Settings for strict mode and handler config (cached
            settings when omitted).

    Returns:
        New EventDispatcher owned by the caller.

    Raises:
        RuntimeError: In strict mode, if a registry event requires a handler
            kind that has no implementation for it.

    Usage:
        dispatcher = create_event_dispatcher()
        handler = get_change_customer_address_handler(session, dispatcher)
    """
    logger = logger or get_logger()
    settings = settings or get_settings()

    dispatcher = EventDispatcher(logger=logger)
    logging_handlers = _logging_handlers(logger)
    email_handlers = _email_handlers(logger, settings)

    for metadata in EVENT_REGISTRY:
        event_class = metadata.event_class
        required = [
            ("logging", metadata.requires_logging, logging_handlers),
            ("email", metadata.requires_email, email_handlers),
        ]

        for kind, is_required, handlers in required:
            if not is_required:
                continue

            handler = handlers.get(event_class)
            if handler is None:
                if settings.events_strict_mode:
                    raise RuntimeError(
                        f"EVENTS_STRICT_MODE: Missing required {kind} handler\n"
                        f"Event: {event_class.__name__}\n"
                        f"Or disable strict mode: Set EVENTS_STRICT_MODE=false"
                    )
                logger.warning(
                    "missing_event_handler",
                    event_class=event_class.__name__,
                    handler_kind=kind,
                )
                continue

            dispatcher.register(event_class, handler)

    return dispatcher
