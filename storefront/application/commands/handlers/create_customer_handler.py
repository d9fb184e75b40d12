"""CreateCustomer command handler.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain and core layers (entities, protocols, events)
- Uses Result types for expected failures
- Notifies CustomerCreated after the customer is persisted
"""

from typing import cast

from uuid_extensions import uuid7

from storefront.application.commands.customer_commands import CreateCustomer
from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError, DomainError, ValidationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities.customer import Customer
from storefront.domain.events.customer_events import CustomerCreated
from storefront.domain.protocols.customer_repository import CustomerRepository
from storefront.domain.protocols.event_dispatcher_protocol import (
    EventDispatcherProtocol,
)


class CreateCustomerHandler:
    """Handler for CreateCustomer command.

    Dependencies (injected via constructor):
        - CustomerRepository: For persistence
        - EventDispatcherProtocol: For domain events
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        event_dispatcher: EventDispatcherProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            customer_repo: Customer repository.
            event_dispatcher: Dispatcher notified after persistence.
        """
        self._customer_repo = customer_repo
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: CreateCustomer) -> Result[Customer, DomainError]:
        """Handle CreateCustomer command.

        Args:
            cmd: CreateCustomer command.

        Returns:
            Success(Customer): Customer created.
            Failure(ValidationError): Name empty or otherwise invalid.
            Failure(ConflictError): A customer with this id already exists.

        Side Effects:
            - Inserts the customer
            - Notifies CustomerCreated (handler exceptions propagate)
        """
        customer_id = cmd.customer_id or str(uuid7())

        try:
            customer = Customer(id=customer_id, name=cmd.name, address=cmd.address)
        except ValueError as e:
            return cast(
                Result[Customer, DomainError],
                Failure(
                    error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message=str(e),
                        field="name",
                    )
                ),
            )

        if await self._customer_repo.find(customer_id) is not None:
            return cast(
                Result[Customer, DomainError],
                Failure(
                    error=ConflictError(
                        code=ErrorCode.CUSTOMER_ALREADY_EXISTS,
                        message=f"Customer already exists: {customer_id}",
                        resource_type="Customer",
                        conflicting_field="id",
                    )
                ),
            )

        await self._customer_repo.create(customer)

        self._event_dispatcher.notify(CustomerCreated(customer=customer))

        return Success(value=customer)
