"""Customer repository protocol.

Defines the interface for customer persistence operations.
"""

from typing import Protocol

from storefront.domain.entities.customer import Customer


class CustomerRepository(Protocol):
    """Protocol for customer persistence operations.

    **Design Principles**:
    - Read methods return domain entities (Customer), not database models
    - create() and update() are separate: update of an unknown id is an error
    """

    async def create(self, customer: Customer) -> None:
        """Persist a new customer."""
        ...

    async def update(self, customer: Customer) -> None:
        """Persist changes to an existing customer.

        Raises:
            LookupError: If no customer with this id exists.
        """
        ...

    async def find(self, customer_id: str) -> Customer | None:
        """Find customer by ID.

        Returns:
            Customer entity if found, None otherwise.
        """
        ...

    async def find_all(self) -> list[Customer]:
        """List all customers."""
        ...
