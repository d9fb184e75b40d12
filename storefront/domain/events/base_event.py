"""Base domain event class.

Domain events represent "things that happened" in the business domain and
are always named in past tense (e.g., CustomerCreated, OrderPlaced).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - Each event kind is its own subclass carrying a typed payload; the
      dispatcher routes on the event class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class CustomerCreated(DomainEvent):
    ...     customer: Customer
    >>>
    >>> event = CustomerCreated(customer=customer)
    >>> print(event.event_id)  # Auto-generated UUID
    >>> print(event.occurred_at)  # Auto-generated timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (CustomerCreated, NOT CreateCustomer)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v4 if not provided.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.

    Notes:
        - The event itself is immutable; payload entities are held by
          reference and are never copied or modified by the dispatcher.
        - Events are notified AFTER business logic succeeds (facts, not intents).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_name(self) -> str:
        """Event class name (e.g., "CustomerAddressChanged") for logging."""
        return type(self).__name__
