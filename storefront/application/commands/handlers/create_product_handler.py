"""CreateProduct command handler."""

from typing import cast

from uuid_extensions import uuid7

from storefront.application.commands.product_commands import CreateProduct
from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError, DomainError, ValidationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities.product import Product
from storefront.domain.events.product_events import ProductCreated
from storefront.domain.protocols.event_dispatcher_protocol import (
    EventDispatcherProtocol,
)
from storefront.domain.protocols.product_repository import ProductRepository


class CreateProductHandler:
    """Handler for CreateProduct command."""

    def __init__(
        self,
        product_repo: ProductRepository,
        event_dispatcher: EventDispatcherProtocol,
    ) -> None:
        self._product_repo = product_repo
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: CreateProduct) -> Result[Product, DomainError]:
        """Handle CreateProduct command.

        Returns:
            Success(Product): Product created.
            Failure(ValidationError): Empty name or negative price.
            Failure(ConflictError): A product with this id already exists.
        """
        product_id = cmd.product_id or str(uuid7())

        try:
            product = Product(id=product_id, name=cmd.name, price=cmd.price)
        except ValueError as e:
            return cast(
                Result[Product, DomainError],
                Failure(
                    error=ValidationError(
                        code=ErrorCode.INVALID_PRICE
                        if cmd.price < 0
                        else ErrorCode.VALIDATION_FAILED,
                        message=str(e),
                        field="price" if cmd.price < 0 else "name",
                    )
                ),
            )

        if await self._product_repo.find(product_id) is not None:
            return cast(
                Result[Product, DomainError],
                Failure(
                    error=ConflictError(
                        code=ErrorCode.PRODUCT_ALREADY_EXISTS,
                        message=f"Product already exists: {product_id}",
                        resource_type="Product",
                        conflicting_field="id",
                    )
                ),
            )

        await self._product_repo.create(product)

        self._event_dispatcher.notify(ProductCreated(product=product))

        return Success(value=product)
