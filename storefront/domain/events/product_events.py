"""Product domain events."""

from dataclasses import dataclass

from storefront.domain.entities.product import Product
from storefront.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class ProductCreated(DomainEvent):
    """A product was added to the catalogue.

    Attributes:
        product: The newly created product.
    """

    product: Product
