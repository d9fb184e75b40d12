"""Repository dependency factories.

Session-scoped repository instances. Repositories sharing a session share
one transaction.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.infrastructure.persistence.repositories import (
    CustomerRepository,
    OrderRepository,
    ProductRepository,
)


def get_customer_repository(session: AsyncSession) -> CustomerRepository:
    """Get customer repository bound to a session."""
    return CustomerRepository(session=session)


def get_product_repository(session: AsyncSession) -> ProductRepository:
    """Get product repository bound to a session."""
    return ProductRepository(session=session)


def get_order_repository(session: AsyncSession) -> OrderRepository:
    """Get order repository bound to a session."""
    return OrderRepository(session=session)
