"""Product repository implementation.

SQLAlchemy implementation of the ProductRepository protocol.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities.product import Product
from storefront.infrastructure.persistence.models.product import ProductModel


class ProductRepository:
    """SQLAlchemy implementation of ProductRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, product: Product) -> None:
        """Persist a new product."""
        self._session.add(
            ProductModel(id=product.id, name=product.name, price=product.price)
        )
        await self._session.flush()

    async def update(self, product: Product) -> None:
        """Persist changes to an existing product.

        Raises:
            LookupError: If the product does not exist.
        """
        model = await self._get_model(product.id)
        if model is None:
            raise LookupError(f"Product not found: {product.id}")

        model.name = product.name
        model.price = product.price

        await self._session.flush()

    async def find(self, product_id: str) -> Product | None:
        """Find product by ID (None if missing)."""
        model = await self._get_model(product_id)
        if model is None:
            return None

        return self._to_entity(model)

    async def find_all(self) -> list[Product]:
        """List all products by creation time, then id."""
        stmt = select(ProductModel).order_by(ProductModel.created_at, ProductModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def _get_model(self, product_id: str) -> ProductModel | None:
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ProductModel) -> Product:
        return Product(id=model.id, name=model.name, price=model.price)
