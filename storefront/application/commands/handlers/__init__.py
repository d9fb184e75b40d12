"""Command handlers."""

from storefront.application.commands.handlers.change_customer_address_handler import (
    ChangeCustomerAddressHandler,
)
from storefront.application.commands.handlers.create_customer_handler import (
    CreateCustomerHandler,
)
from storefront.application.commands.handlers.create_product_handler import (
    CreateProductHandler,
)
from storefront.application.commands.handlers.place_order_handler import (
    PlaceOrderHandler,
)

__all__ = [
    "ChangeCustomerAddressHandler",
    "CreateCustomerHandler",
    "CreateProductHandler",
    "PlaceOrderHandler",
]
