"""Customer domain events.

Events:
    - CustomerCreated: A new customer was persisted.
    - CustomerAddressChanged: A customer's delivery address was replaced.

Both carry the affected Customer entity as payload (by reference).
"""

from dataclasses import dataclass

from storefront.domain.entities.customer import Customer
from storefront.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerCreated(DomainEvent):
    """A customer was created.

    Attributes:
        customer: The newly created customer.
    """

    customer: Customer


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerAddressChanged(DomainEvent):
    """A customer's address was changed.

    Attributes:
        customer: The customer, already holding the new address.
    """

    customer: Customer
