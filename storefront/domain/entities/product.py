"""Product domain entity.

Products are sold through orders. An order item copies the product's name
and price at the time of purchase, so later price changes never rewrite
placed orders.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Product:
    """Catalogue product.

    Attributes:
        id: Unique product identifier.
        name: Product name.
        price: Unit price (Decimal, never float).

    Example:
        >>> product = Product(id="p1", name="Product 1", price=Decimal("10"))
        >>> product.change_price(Decimal("12.50"))
    """

    id: str
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        """Validate product after initialization.

        Raises:
            ValueError: If id or name is empty, or price is negative.
        """
        if not self.id:
            raise ValueError("Id is required")
        if not self.name:
            raise ValueError("Name is required")
        if self.price < 0:
            raise ValueError("Price must be greater or equal to zero")

    def change_name(self, name: str) -> None:
        """Rename the product.

        Raises:
            ValueError: If name is empty.
        """
        if not name:
            raise ValueError("Name is required")
        self.name = name

    def change_price(self, price: Decimal) -> None:
        """Change the unit price.

        Raises:
            ValueError: If price is negative.
        """
        if price < 0:
            raise ValueError("Price must be greater or equal to zero")
        self.price = price
