"""Customer commands (CQRS write operations).

All commands are immutable (frozen=True) and use keyword-only arguments.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass

from storefront.domain.value_objects.address import Address


@dataclass(frozen=True, kw_only=True)
class CreateCustomer:
    """Register a new customer.

    Attributes:
        name: Customer display name.
        address: Optional initial address.
        customer_id: Explicit identifier; generated (uuid7) when omitted.

    Example:
        >>> command = CreateCustomer(name="Customer 1")
        >>> result = await handler.handle(command)
    """

    name: str
    address: Address | None = None
    customer_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class ChangeCustomerAddress:
    """Replace a customer's delivery address.

    Attributes:
        customer_id: Customer to update.
        address: New address.
    """

    customer_id: str
    address: Address
