"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from storefront.core.container import get_logger, create_event_dispatcher, ...

The container is organized into modules by concern:
- infrastructure: Logging and database (application-scoped)
- events: Event dispatcher construction and handler wiring
- repositories: Repository factories (session-scoped)
- handlers: Command handler factories (session-scoped)
"""

from storefront.core.container.events import create_event_dispatcher
from storefront.core.container.handlers import (
    get_change_customer_address_handler,
    get_create_customer_handler,
    get_create_product_handler,
    get_place_order_handler,
)
from storefront.core.container.infrastructure import get_database, get_logger
from storefront.core.container.repositories import (
    get_customer_repository,
    get_order_repository,
    get_product_repository,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_logger",
    # Events
    "create_event_dispatcher",
    # Repositories
    "get_customer_repository",
    "get_order_repository",
    "get_product_repository",
    # Handlers
    "get_change_customer_address_handler",
    "get_create_customer_handler",
    "get_create_product_handler",
    "get_place_order_handler",
]
