"""Unit tests for EventDispatcher.

Tests cover:
- register/notify basic flow and registration order
- Duplicate registration (no deduplication)
- unregister (identity match, key kept with empty list, unknown type no-op)
- unregister_all (all keys removed)
- No handlers registered (no-op)
- Exact type routing (no inheritance matching)
- Fail-fast: handler exception propagates, later handlers skipped
- Registry accessor returns a snapshot

Architecture:
- Unit tests with mocked logger
- Handlers are small recording objects exposing handle(event)
"""

from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from storefront.domain.events.base_event import DomainEvent
from storefront.domain.events.customer_events import (
    CustomerAddressChanged,
    CustomerCreated,
)
from storefront.infrastructure.events.event_dispatcher import EventDispatcher
from tests.conftest import create_address, create_customer


class RecordingHandler:
    """Handler that records every event it receives into a shared log."""

    def __init__(self, name: str, calls: list) -> None:
        self.name = name
        self.calls = calls

    def handle(self, event: DomainEvent) -> None:
        self.calls.append((self.name, event))


class FailingHandler:
    def handle(self, event: DomainEvent) -> None:
        raise RuntimeError("handler exploded")


@dataclass(frozen=True, kw_only=True, slots=True)
class SpecialCustomerCreated(CustomerCreated):
    """Subclass used to check exact-type routing."""


@pytest.fixture
def dispatcher(mock_logger):
    return EventDispatcher(logger=mock_logger)


@pytest.mark.unit
class TestEventDispatcherRegister:
    """Test register and the registry accessor."""

    def test_register_adds_handlers_in_order(self, dispatcher):
        calls: list = []
        first = RecordingHandler("first", calls)
        second = RecordingHandler("second", calls)

        dispatcher.register(CustomerCreated, first)
        dispatcher.register(CustomerCreated, second)

        registered = dispatcher.handlers[CustomerCreated]
        assert len(registered) == 2
        assert registered[0] is first
        assert registered[1] is second

    def test_register_address_changed_handler(self, dispatcher):
        handler = RecordingHandler("address", [])

        dispatcher.register(CustomerAddressChanged, handler)

        assert len(dispatcher.handlers[CustomerAddressChanged]) == 1
        assert dispatcher.handlers[CustomerAddressChanged][0] is handler

    def test_new_dispatcher_is_empty(self, dispatcher):
        assert dispatcher.handlers == {}

    def test_handlers_accessor_is_a_snapshot(self, dispatcher):
        handler = RecordingHandler("h", [])
        dispatcher.register(CustomerCreated, handler)

        snapshot = dict(dispatcher.handlers)
        snapshot.pop(CustomerCreated)

        assert CustomerCreated in dispatcher.handlers

    def test_dispatchers_do_not_share_state(self, mock_logger):
        first = EventDispatcher(logger=mock_logger)
        second = EventDispatcher(logger=mock_logger)

        first.register(CustomerCreated, RecordingHandler("h", []))

        assert CustomerCreated not in second.handlers


@pytest.mark.unit
class TestEventDispatcherUnregister:
    """Test unregister and unregister_all."""

    def test_unregister_keeps_key_with_empty_list(self, dispatcher):
        handler = RecordingHandler("h", [])
        dispatcher.register(CustomerCreated, handler)

        dispatcher.unregister(CustomerCreated, handler)

        assert CustomerCreated in dispatcher.handlers
        assert len(dispatcher.handlers[CustomerCreated]) == 0

    def test_unregister_removes_only_matching_instance(self, dispatcher):
        calls: list = []
        keep = RecordingHandler("keep", calls)
        remove = RecordingHandler("remove", calls)
        dispatcher.register(CustomerCreated, keep)
        dispatcher.register(CustomerCreated, remove)

        dispatcher.unregister(CustomerCreated, remove)

        assert dispatcher.handlers[CustomerCreated] == (keep,)

    def test_unregister_matches_by_identity_not_equality(self, dispatcher):
        class AlwaysEqualHandler(RecordingHandler):
            def __eq__(self, other):
                return True

            __hash__ = object.__hash__

        registered = AlwaysEqualHandler("registered", [])
        other = AlwaysEqualHandler("other", [])
        dispatcher.register(CustomerCreated, registered)

        dispatcher.unregister(CustomerCreated, other)

        assert dispatcher.handlers[CustomerCreated] == (registered,)

    def test_unregister_removes_every_duplicate(self, dispatcher):
        handler = RecordingHandler("h", [])
        dispatcher.register(CustomerCreated, handler)
        dispatcher.register(CustomerCreated, handler)

        dispatcher.unregister(CustomerCreated, handler)

        assert dispatcher.handlers[CustomerCreated] == ()

    def test_unregister_unknown_event_type_is_noop(self, dispatcher):
        dispatcher.unregister(CustomerCreated, RecordingHandler("h", []))

        assert CustomerCreated not in dispatcher.handlers

    def test_unregister_all_removes_every_key(self, dispatcher):
        dispatcher.register(CustomerCreated, RecordingHandler("a", []))
        dispatcher.register(CustomerCreated, RecordingHandler("b", []))
        dispatcher.register(CustomerAddressChanged, RecordingHandler("c", []))

        dispatcher.unregister_all()

        assert dispatcher.handlers == {}
        assert CustomerCreated not in dispatcher.handlers


@pytest.mark.unit
class TestEventDispatcherNotify:
    """Test notify."""

    def test_notify_calls_handlers_once_in_order_with_same_event(self, dispatcher):
        calls: list = []
        dispatcher.register(CustomerCreated, RecordingHandler("h1", calls))
        dispatcher.register(CustomerCreated, RecordingHandler("h2", calls))
        event = CustomerCreated(customer=create_customer())

        dispatcher.notify(event)

        assert [name for name, _ in calls] == ["h1", "h2"]
        assert all(received is event for _, received in calls)
        assert calls[0][1].customer is event.customer

    def test_notify_with_no_handlers_is_noop(self, dispatcher, mock_logger):
        dispatcher.notify(CustomerCreated(customer=create_customer()))

        mock_logger.debug.assert_not_called()

    def test_notify_after_unregister_invokes_nothing(self, dispatcher):
        calls: list = []
        handler = RecordingHandler("h", calls)
        dispatcher.register(CustomerCreated, handler)
        dispatcher.unregister(CustomerCreated, handler)

        dispatcher.notify(CustomerCreated(customer=create_customer()))

        assert calls == []

    def test_notify_twice_registered_handler_runs_twice(self, dispatcher):
        calls: list = []
        handler = RecordingHandler("h", calls)
        dispatcher.register(CustomerCreated, handler)
        dispatcher.register(CustomerCreated, handler)

        dispatcher.notify(CustomerCreated(customer=create_customer()))

        assert len(calls) == 2

    def test_notify_routes_by_event_type(self, dispatcher):
        created_calls: list = []
        changed_calls: list = []
        dispatcher.register(CustomerCreated, RecordingHandler("created", created_calls))
        dispatcher.register(
            CustomerAddressChanged, RecordingHandler("changed", changed_calls)
        )
        customer = create_customer(address=create_address())

        dispatcher.notify(CustomerAddressChanged(customer=customer))

        assert created_calls == []
        assert len(changed_calls) == 1

    def test_notify_does_not_match_subclasses(self, dispatcher):
        calls: list = []
        dispatcher.register(CustomerCreated, RecordingHandler("base", calls))

        dispatcher.notify(SpecialCustomerCreated(customer=create_customer()))

        assert calls == []

    def test_notify_each_event_separately(self, dispatcher):
        handler = MagicMock()
        dispatcher.register(CustomerCreated, handler)
        customer = create_customer()
        first = CustomerCreated(customer=customer)
        second = CustomerCreated(customer=customer)

        dispatcher.notify(first)
        dispatcher.notify(second)

        assert handler.handle.call_count == 2
        handler.handle.assert_any_call(first)
        handler.handle.assert_any_call(second)

    def test_notify_logs_dispatch_at_debug(self, dispatcher, mock_logger):
        dispatcher.register(CustomerCreated, RecordingHandler("h", []))
        event = CustomerCreated(customer=create_customer())

        dispatcher.notify(event)

        mock_logger.debug.assert_called_once_with(
            "event_dispatching",
            event_type="CustomerCreated",
            event_id=str(event.event_id),
            handler_count=1,
        )

    def test_handler_registered_during_notify_runs_on_next_notify(self, dispatcher):
        calls: list = []
        late = RecordingHandler("late", calls)

        class RegisteringHandler:
            def handle(self, event):
                calls.append(("registering", event))
                dispatcher.register(CustomerCreated, late)

        dispatcher.register(CustomerCreated, RegisteringHandler())

        dispatcher.notify(CustomerCreated(customer=create_customer()))
        assert [name for name, _ in calls] == ["registering"]

        dispatcher.notify(CustomerCreated(customer=create_customer()))
        assert [name for name, _ in calls] == ["registering", "registering", "late"]


@pytest.mark.unit
class TestEventDispatcherFailFast:
    """Handler exceptions propagate and stop the remaining handlers."""

    def test_handler_exception_propagates_to_caller(self, dispatcher):
        dispatcher.register(CustomerCreated, FailingHandler())

        with pytest.raises(RuntimeError, match="handler exploded"):
            dispatcher.notify(CustomerCreated(customer=create_customer()))

    def test_handlers_after_failure_are_skipped(self, dispatcher):
        calls: list = []
        dispatcher.register(CustomerCreated, RecordingHandler("before", calls))
        dispatcher.register(CustomerCreated, FailingHandler())
        dispatcher.register(CustomerCreated, RecordingHandler("after", calls))

        with pytest.raises(RuntimeError):
            dispatcher.notify(CustomerCreated(customer=create_customer()))

        assert [name for name, _ in calls] == ["before"]

    def test_handler_failure_is_logged(self, dispatcher, mock_logger):
        dispatcher.register(CustomerCreated, FailingHandler())
        event = CustomerCreated(customer=create_customer())

        with pytest.raises(RuntimeError):
            dispatcher.notify(event)

        mock_logger.error.assert_called_once()
        args, kwargs = mock_logger.error.call_args
        assert args == ("event_handler_failed",)
        assert isinstance(kwargs["error"], RuntimeError)
        assert kwargs["event_type"] == event.event_name == "CustomerCreated"
        assert kwargs["handler_name"] == "FailingHandler"
        assert kwargs["event_id"] == str(event.event_id)
