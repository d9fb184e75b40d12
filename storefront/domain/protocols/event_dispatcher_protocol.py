"""Event dispatcher protocol (port) for domain events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure implements it (storefront.infrastructure.events.event_dispatcher)
    - Container (create_event_dispatcher) builds a fully wired instance

Usage:
    >>> dispatcher = create_event_dispatcher()
    >>> dispatcher.register(CustomerAddressChanged, handler)
    >>> dispatcher.notify(CustomerAddressChanged(customer=customer))
"""

from collections.abc import Mapping, Sequence
from typing import Protocol, TypeVar

from storefront.domain.events.base_event import DomainEvent

E_contra = TypeVar("E_contra", bound=DomainEvent, contravariant=True)


class EventHandler(Protocol[E_contra]):
    """Protocol for event handler objects.

    A handler reacts to one event kind. Handlers run synchronously on the
    notifying call stack; anything they raise propagates to the caller of
    notify().

    Example:
        >>> class CustomerAddressChangedLoggingHandler:
        ...     def handle(self, event: CustomerAddressChanged) -> None:
        ...         logger.info("customer_address_changed", ...)
    """

    def handle(self, event: E_contra) -> None:
        """React to an event. Return value is ignored."""
        ...


class EventDispatcherProtocol(Protocol):
    """Protocol for event dispatcher implementations.

    Key Requirements:
        1. **Typed routing**: Handlers are registered per event class and
           only receive events of that exact class (no inheritance matching).
        2. **Ordering**: Handlers run in registration order.
        3. **Synchronous**: notify() returns after every handler has run.
        4. **Fail-fast**: A handler exception aborts the remaining handlers
           and propagates to the caller.
    """

    @property
    def handlers(self) -> Mapping[type[DomainEvent], Sequence[EventHandler]]:
        """Snapshot of the event class -> handlers mapping (for inspection)."""
        ...

    def register(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Append handler to the list for event_type (duplicates allowed)."""
        ...

    def unregister(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Remove handler (identity match) from the list for event_type."""
        ...

    def unregister_all(self) -> None:
        """Remove every event type and handler."""
        ...

    def notify(self, event: DomainEvent) -> None:
        """Invoke every handler registered for type(event), in order."""
        ...
