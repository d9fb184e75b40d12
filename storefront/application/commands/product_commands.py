"""Product commands (CQRS write operations)."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, kw_only=True)
class CreateProduct:
    """Add a product to the catalogue.

    Attributes:
        name: Product name.
        price: Unit price.
        product_id: Explicit identifier; generated (uuid7) when omitted.
    """

    name: str
    price: Decimal
    product_id: str | None = None
