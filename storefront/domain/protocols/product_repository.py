"""Product repository protocol."""

from typing import Protocol

from storefront.domain.entities.product import Product


class ProductRepository(Protocol):
    """Protocol for product persistence operations."""

    async def create(self, product: Product) -> None:
        """Persist a new product."""
        ...

    async def update(self, product: Product) -> None:
        """Persist changes to an existing product.

        Raises:
            LookupError: If no product with this id exists.
        """
        ...

    async def find(self, product_id: str) -> Product | None:
        """Find product by ID (None if missing)."""
        ...

    async def find_all(self) -> list[Product]:
        """List all products."""
        ...
