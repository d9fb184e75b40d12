"""Synchronous in-process event dispatcher.

Implements EventDispatcherProtocol with a dictionary-based registry
(event class -> ordered list of handler objects).

Architecture:
    - Implements EventDispatcherProtocol (hexagonal adapter pattern)
    - Registry keyed by DomainEvent subclass (exact type match)
    - Handlers run sequentially, in registration order, on the caller's stack
    - Fail-fast: a handler exception is logged and re-raised, remaining
      handlers for that event are skipped

Usage:
    >>> dispatcher = EventDispatcher(logger=get_logger())
    >>> dispatcher.register(CustomerAddressChanged, address_logging_handler)
    >>> dispatcher.notify(CustomerAddressChanged(customer=customer))
"""

from collections.abc import Mapping, Sequence
from typing import TypeVar

from storefront.domain.events.base_event import DomainEvent
from storefront.domain.protocols.event_dispatcher_protocol import EventHandler
from storefront.domain.protocols.logger_protocol import LoggerProtocol

E = TypeVar("E", bound=DomainEvent)


class EventDispatcher:
    """In-memory, synchronous event dispatcher.

    Thread Safety:
        - NOT thread-safe. One owner registers handlers during setup and
          notifies during processing; concurrent callers must hold their own
          lock around register/unregister/notify.

    Attributes:
        _handlers: Mapping of event class to handler list. A key whose
            handlers were all unregistered stays present with an empty list.
        _logger: Logger for dispatch tracing and handler failures.

    Example:
        >>> dispatcher = EventDispatcher(logger=logger)
        >>> dispatcher.register(CustomerCreated, first_handler)
        >>> dispatcher.register(CustomerCreated, second_handler)
        >>> dispatcher.notify(CustomerCreated(customer=customer))
        >>> # first_handler.handle ran before second_handler.handle
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize an empty dispatcher.

        Args:
            logger: Logger for dispatch tracing (debug level) and handler
                failures (error level).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = {}
        self._logger = logger

    @property
    def handlers(self) -> Mapping[type[DomainEvent], Sequence[EventHandler]]:
        """Snapshot of the registry for inspection.

        Returns:
            New dict of event class -> tuple of handlers. Mutating the
            result does not affect the dispatcher.
        """
        return {
            event_type: tuple(handlers)
            for event_type, handlers in self._handlers.items()
        }

    def register(self, event_type: type[E], handler: EventHandler[E]) -> None:
        """Append a handler for an event class.

        No duplicate detection: registering the same handler twice makes it
        run twice per notify.

        Args:
            event_type: DomainEvent subclass to react to.
            handler: Object exposing handle(event).
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unregister(self, event_type: type[E], handler: EventHandler[E]) -> None:
        """Remove a handler from an event class.

        Every occurrence of ``handler`` (matched by identity) is removed.
        Unknown event types are ignored. The key is kept even when its list
        becomes empty.

        Args:
            event_type: DomainEvent subclass the handler was registered for.
            handler: Handler instance to remove.
        """
        handlers = self._handlers.get(event_type)
        if handlers is None:
            return

        handlers[:] = [h for h in handlers if h is not handler]

    def unregister_all(self) -> None:
        """Remove every event type and its handlers."""
        self._handlers.clear()

    def notify(self, event: DomainEvent) -> None:
        """Invoke every handler registered for the event's exact class.

        Handlers run in registration order. If none are registered this is a
        no-op. The handler list is snapshotted first, so handlers that
        register or unregister during dispatch only affect later notifies.

        Args:
            event: Domain event instance, passed unchanged to each handler.

        Raises:
            Exception: Whatever a handler raises, after it is logged.
                Handlers after the failing one are not invoked.
        """
        event_type = type(event)
        handlers = tuple(self._handlers.get(event_type, ()))

        if not handlers:
            return

        self._logger.debug(
            "event_dispatching",
            event_type=event.event_name,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                handler.handle(event)
            except Exception as e:
                self._logger.error(
                    "event_handler_failed",
                    error=e,
                    event_type=event.event_name,
                    event_id=str(event.event_id),
                    handler_name=type(handler).__name__,
                )
                raise
