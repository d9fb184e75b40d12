"""Customer domain entity.

A customer places orders and accumulates reward points. Customers can only
be activated once they have an address to deliver to.

Usage:
    from storefront.domain.entities import Customer
    from storefront.domain.value_objects import Address

    customer = Customer(id="c1", name="Customer 1")
    customer.change_address(Address("Street 1", 1, "13330-250", "Sao Paulo"))
    customer.activate()
"""

from dataclasses import dataclass

from storefront.domain.value_objects.address import Address


@dataclass
class Customer:
    """Customer entity.

    Attributes:
        id: Unique customer identifier.
        name: Customer display name.
        address: Delivery address (None until provided).
        active: Whether the customer can place orders.
        reward_points: Loyalty points granted on placed orders.

    Example:
        >>> customer = Customer(id="c1", name="Customer 1")
        >>> customer.add_reward_points(10)
        >>> customer.reward_points
        10
    """

    id: str
    name: str
    address: Address | None = None
    active: bool = False
    reward_points: int = 0

    def __post_init__(self) -> None:
        """Validate customer after initialization.

        Raises:
            ValueError: If id or name is empty.
        """
        self._validate()

    def _validate(self) -> None:
        if not self.id:
            raise ValueError("Id is required")
        if not self.name:
            raise ValueError("Name is required")
        if self.reward_points < 0:
            raise ValueError("Reward points cannot be negative")

    def change_name(self, name: str) -> None:
        """Rename the customer.

        Raises:
            ValueError: If name is empty.
        """
        if not name:
            raise ValueError("Name is required")
        self.name = name

    def change_address(self, address: Address) -> None:
        """Replace the delivery address."""
        self.address = address

    def activate(self) -> None:
        """Activate the customer.

        Raises:
            ValueError: If the customer has no address.
        """
        if self.address is None:
            raise ValueError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        """Deactivate the customer."""
        self.active = False

    def is_active(self) -> bool:
        """Check whether the customer is active."""
        return self.active

    def add_reward_points(self, points: int) -> None:
        """Grant reward points.

        Raises:
            ValueError: If points is negative.
        """
        if points < 0:
            raise ValueError("Reward points to add cannot be negative")
        self.reward_points += points

    def __str__(self) -> str:
        """Return human-readable representation."""
        status = "active" if self.active else "inactive"
        return f"{self.name} ({self.id}) - {status}"
