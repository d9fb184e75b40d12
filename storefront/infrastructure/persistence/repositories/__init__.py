"""Repository implementations (SQLAlchemy async)."""

from storefront.infrastructure.persistence.repositories.customer_repository import (
    CustomerRepository,
)
from storefront.infrastructure.persistence.repositories.order_repository import (
    OrderRepository,
)
from storefront.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)

__all__ = [
    "CustomerRepository",
    "OrderRepository",
    "ProductRepository",
]
