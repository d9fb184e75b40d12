"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Async tests are collected with the asyncio marker
2. Integration tests get a fresh in-memory database per test
3. Unit tests get a mocked LoggerProtocol
"""

import inspect
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from storefront.domain.entities.customer import Customer
from storefront.domain.entities.order import Order, OrderItem
from storefront.domain.entities.product import Product
from storefront.domain.value_objects.address import Address


# Test helper functions for domain entities


def create_address(
    street: str = "Street 1",
    number: int = 1,
    zip_code: str = "Zipcode 1",
    city: str = "City 1",
) -> Address:
    """Helper to create an Address for testing."""
    return Address(street=street, number=number, zip_code=zip_code, city=city)


def create_customer(
    customer_id: str = "c1",
    name: str = "Customer 1",
    address: Address | None = None,
) -> Customer:
    """Helper to create a Customer for testing."""
    return Customer(id=customer_id, name=name, address=address)


def create_product(
    product_id: str = "p1",
    name: str = "Product 1",
    price: Decimal = Decimal("10"),
) -> Product:
    """Helper to create a Product for testing."""
    return Product(id=product_id, name=name, price=price)


def create_order(
    order_id: str = "o1",
    customer_id: str = "c1",
    product: Product | None = None,
    quantity: int = 2,
) -> Order:
    """Helper to create a single-item Order for testing.

    The item id equals the order id, so orders built with different ids
    never share item rows.
    """
    product = product or create_product()
    item = OrderItem(
        id=order_id,
        name=product.name,
        price=product.price,
        product_id=product.id,
        quantity=quantity,
    )
    return Order(id=order_id, customer_id=customer_id, items=[item])


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def mock_logger():
    """Mocked LoggerProtocol (records debug/info/warning/error calls)."""
    return MagicMock()


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory database with all tables created.

    Every session created from this Database shares the same in-memory
    connection, so data committed in one session is visible in the next.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                ...
    """
    from storefront.infrastructure.persistence.database import Database

    db = Database(database_url="sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.close()
