"""ChangeCustomerAddress command handler.

Loads the customer, replaces the address, persists it and notifies
CustomerAddressChanged (which the container wires to a logging handler).
"""

from typing import cast

from storefront.application.commands.customer_commands import ChangeCustomerAddress
from storefront.core.enums import ErrorCode
from storefront.core.errors import DomainError, NotFoundError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities.customer import Customer
from storefront.domain.events.customer_events import CustomerAddressChanged
from storefront.domain.protocols.customer_repository import CustomerRepository
from storefront.domain.protocols.event_dispatcher_protocol import (
    EventDispatcherProtocol,
)


class ChangeCustomerAddressHandler:
    """Handler for ChangeCustomerAddress command."""

    def __init__(
        self,
        customer_repo: CustomerRepository,
        event_dispatcher: EventDispatcherProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._event_dispatcher = event_dispatcher

    async def handle(self, cmd: ChangeCustomerAddress) -> Result[Customer, DomainError]:
        """Handle ChangeCustomerAddress command.

        Returns:
            Success(Customer): Customer with the new address.
            Failure(NotFoundError): Customer does not exist.
        """
        customer = await self._customer_repo.find(cmd.customer_id)
        if customer is None:
            return cast(
                Result[Customer, DomainError],
                Failure(
                    error=NotFoundError(
                        code=ErrorCode.CUSTOMER_NOT_FOUND,
                        message="Customer not found",
                        resource_type="Customer",
                        resource_id=cmd.customer_id,
                    )
                ),
            )

        customer.change_address(cmd.address)
        await self._customer_repo.update(customer)

        self._event_dispatcher.notify(CustomerAddressChanged(customer=customer))

        return Success(value=customer)
