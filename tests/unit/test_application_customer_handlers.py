"""Unit tests for CreateCustomerHandler and ChangeCustomerAddressHandler.

Uses mocked repository and event dispatcher for isolation.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from storefront.application.commands.customer_commands import (
    ChangeCustomerAddress,
    CreateCustomer,
)
from storefront.application.commands.handlers.change_customer_address_handler import (
    ChangeCustomerAddressHandler,
)
from storefront.application.commands.handlers.create_customer_handler import (
    CreateCustomerHandler,
)
from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError, NotFoundError, ValidationError
from storefront.core.result import Failure, Success
from storefront.domain.events.customer_events import (
    CustomerAddressChanged,
    CustomerCreated,
)
from storefront.domain.protocols.customer_repository import CustomerRepository
from storefront.domain.protocols.event_dispatcher_protocol import (
    EventDispatcherProtocol,
)
from tests.conftest import create_address, create_customer


# =============================================================================
# Test Fixtures
# =============================================================================


def create_mocks() -> tuple[AsyncMock, MagicMock]:
    """Create mocked repository (async) and dispatcher (sync)."""
    repo = AsyncMock(spec=CustomerRepository)
    repo.find.return_value = None
    dispatcher = MagicMock(spec=EventDispatcherProtocol)
    return repo, dispatcher


# =============================================================================
# CreateCustomer
# =============================================================================


@pytest.mark.asyncio
async def test_create_customer_success():
    """Test customer is persisted and CustomerCreated notified."""
    # Arrange
    repo, dispatcher = create_mocks()
    handler = CreateCustomerHandler(customer_repo=repo, event_dispatcher=dispatcher)

    # Act
    result = await handler.handle(CreateCustomer(name="Customer 1", customer_id="c1"))

    # Assert
    assert isinstance(result, Success)
    assert result.value.id == "c1"
    assert result.value.name == "Customer 1"
    repo.create.assert_called_once_with(result.value)

    dispatcher.notify.assert_called_once()
    event = dispatcher.notify.call_args[0][0]
    assert isinstance(event, CustomerCreated)
    assert event.customer is result.value


@pytest.mark.asyncio
async def test_create_customer_generates_id_when_omitted():
    repo, dispatcher = create_mocks()
    handler = CreateCustomerHandler(customer_repo=repo, event_dispatcher=dispatcher)

    result = await handler.handle(CreateCustomer(name="Customer 1"))

    assert isinstance(result, Success)
    assert result.value.id
    repo.find.assert_called_once_with(result.value.id)


@pytest.mark.asyncio
async def test_create_customer_with_address():
    repo, dispatcher = create_mocks()
    handler = CreateCustomerHandler(customer_repo=repo, event_dispatcher=dispatcher)
    address = create_address()

    result = await handler.handle(CreateCustomer(name="Customer 1", address=address))

    assert isinstance(result, Success)
    assert result.value.address == address


@pytest.mark.asyncio
async def test_create_customer_empty_name_fails_validation():
    """Test empty name returns ValidationError without persisting."""
    # Arrange
    repo, dispatcher = create_mocks()
    handler = CreateCustomerHandler(customer_repo=repo, event_dispatcher=dispatcher)

    # Act
    result = await handler.handle(CreateCustomer(name=""))

    # Assert
    assert isinstance(result, Failure)
    assert isinstance(result.error, ValidationError)
    assert result.error.code == ErrorCode.VALIDATION_FAILED
    assert result.error.field == "name"
    repo.create.assert_not_called()
    dispatcher.notify.assert_not_called()


@pytest.mark.asyncio
async def test_create_customer_duplicate_id_conflicts():
    repo, dispatcher = create_mocks()
    repo.find.return_value = create_customer()
    handler = CreateCustomerHandler(customer_repo=repo, event_dispatcher=dispatcher)

    result = await handler.handle(CreateCustomer(name="Customer 1", customer_id="c1"))

    assert isinstance(result, Failure)
    assert isinstance(result.error, ConflictError)
    assert result.error.code == ErrorCode.CUSTOMER_ALREADY_EXISTS
    repo.create.assert_not_called()
    dispatcher.notify.assert_not_called()


@pytest.mark.asyncio
async def test_create_customer_dispatcher_exception_propagates():
    repo, dispatcher = create_mocks()
    dispatcher.notify.side_effect = RuntimeError("handler failed")
    handler = CreateCustomerHandler(customer_repo=repo, event_dispatcher=dispatcher)

    with pytest.raises(RuntimeError, match="handler failed"):
        await handler.handle(CreateCustomer(name="Customer 1"))

    repo.create.assert_called_once()


# =============================================================================
# ChangeCustomerAddress
# =============================================================================


@pytest.mark.asyncio
async def test_change_address_success():
    """Test address is replaced, persisted and CustomerAddressChanged notified."""
    # Arrange
    repo, dispatcher = create_mocks()
    customer = create_customer(address=create_address())
    repo.find.return_value = customer
    handler = ChangeCustomerAddressHandler(
        customer_repo=repo, event_dispatcher=dispatcher
    )
    new_address = create_address(street="Street 2", number=2)

    # Act
    result = await handler.handle(
        ChangeCustomerAddress(customer_id="c1", address=new_address)
    )

    # Assert
    assert isinstance(result, Success)
    assert result.value.address == new_address
    repo.find.assert_called_once_with("c1")
    repo.update.assert_called_once_with(customer)

    event = dispatcher.notify.call_args[0][0]
    assert isinstance(event, CustomerAddressChanged)
    assert event.customer.address == new_address


@pytest.mark.asyncio
async def test_change_address_customer_not_found():
    repo, dispatcher = create_mocks()
    handler = ChangeCustomerAddressHandler(
        customer_repo=repo, event_dispatcher=dispatcher
    )

    result = await handler.handle(
        ChangeCustomerAddress(customer_id="missing", address=create_address())
    )

    assert isinstance(result, Failure)
    assert isinstance(result.error, NotFoundError)
    assert result.error.code == ErrorCode.CUSTOMER_NOT_FOUND
    assert result.error.resource_id == "missing"
    repo.update.assert_not_called()
    dispatcher.notify.assert_not_called()
