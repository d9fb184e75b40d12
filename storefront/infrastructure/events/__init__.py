"""Event infrastructure (dispatcher and handlers)."""

from storefront.infrastructure.events.event_dispatcher import EventDispatcher

__all__ = ["EventDispatcher"]
