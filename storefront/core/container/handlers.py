"""Command handler factories.

Each factory takes the session (unit of work) and the dispatcher the
caller owns.

Usage:
    dispatcher = create_event_dispatcher()
    async with get_database().get_session() as session:
        handler = get_place_order_handler(session, dispatcher)
        result = await handler.handle(PlaceOrder(...))
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.commands.handlers import (
    ChangeCustomerAddressHandler,
    CreateCustomerHandler,
    CreateProductHandler,
    PlaceOrderHandler,
)
from storefront.core.container.repositories import (
    get_customer_repository,
    get_order_repository,
    get_product_repository,
)
from storefront.domain.protocols.event_dispatcher_protocol import (
    EventDispatcherProtocol,
)


def get_create_customer_handler(
    session: AsyncSession, dispatcher: EventDispatcherProtocol
) -> CreateCustomerHandler:
    """Get CreateCustomer handler."""
    return CreateCustomerHandler(
        customer_repo=get_customer_repository(session),
        event_dispatcher=dispatcher,
    )


def get_change_customer_address_handler(
    session: AsyncSession, dispatcher: EventDispatcherProtocol
) -> ChangeCustomerAddressHandler:
    """Get ChangeCustomerAddress handler."""
    return ChangeCustomerAddressHandler(
        customer_repo=get_customer_repository(session),
        event_dispatcher=dispatcher,
    )


def get_create_product_handler(
    session: AsyncSession, dispatcher: EventDispatcherProtocol
) -> CreateProductHandler:
    """Get CreateProduct handler."""
    return CreateProductHandler(
        product_repo=get_product_repository(session),
        event_dispatcher=dispatcher,
    )


def get_place_order_handler(
    session: AsyncSession, dispatcher: EventDispatcherProtocol
) -> PlaceOrderHandler:
    """Get PlaceOrder handler (all repositories share the session)."""
    return PlaceOrderHandler(
        customer_repo=get_customer_repository(session),
        product_repo=get_product_repository(session),
        order_repo=get_order_repository(session),
        event_dispatcher=dispatcher,
    )
