"""Immutable Address value object.

A customer's delivery address. Replacing an address means building a new
Address, never mutating the existing one.

Usage:
    from storefront.domain.value_objects import Address

    address = Address("Rua 1", 1, "12345-678", "Porto Alegre")
    str(address)  # 'Rua 1, 1, 12345-678 Porto Alegre'
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Immutable postal address.

    Attributes:
        street: Street name.
        number: Building number (positive).
        zip_code: Postal code, kept as text (leading zeros, dashes).
        city: City name.

    Raises:
        ValueError: If any field is empty or number is not positive.
    """

    street: str
    number: int
    zip_code: str
    city: str

    def __post_init__(self) -> None:
        """Validate address fields after initialization."""
        if not self.street:
            raise ValueError("Street is required")
        if self.number <= 0:
            raise ValueError("Number must be greater than zero")
        if not self.zip_code:
            raise ValueError("Zip code is required")
        if not self.city:
            raise ValueError("City is required")

    def __str__(self) -> str:
        """Return single-line address."""
        return f"{self.street}, {self.number}, {self.zip_code} {self.city}"
