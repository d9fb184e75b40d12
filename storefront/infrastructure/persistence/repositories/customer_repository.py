"""Customer repository implementation.

SQLAlchemy implementation of the CustomerRepository protocol.
Maps between Customer domain entity and CustomerModel database model.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities.customer import Customer
from storefront.domain.value_objects.address import Address
from storefront.infrastructure.persistence.models.customer import CustomerModel


class CustomerRepository:
    """SQLAlchemy implementation of CustomerRepository protocol.

    **Implementation Notes**:
    - Writes flush but never commit; the session owner commits
    - Address is flattened into four nullable columns
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(self, customer: Customer) -> None:
        """Persist a new customer.

        Args:
            customer: Customer entity to insert.
        """
        self._session.add(self._to_model(customer))
        await self._session.flush()

    async def update(self, customer: Customer) -> None:
        """Persist changes to an existing customer.

        Args:
            customer: Customer entity with new state.

        Raises:
            LookupError: If the customer does not exist.
        """
        model = await self._get_model(customer.id)
        if model is None:
            raise LookupError(f"Customer not found: {customer.id}")

        model.name = customer.name
        model.street, model.number, model.zip_code, model.city = self._address_columns(
            customer.address
        )
        model.active = customer.active
        model.reward_points = customer.reward_points

        await self._session.flush()

    async def find(self, customer_id: str) -> Customer | None:
        """Find customer by ID.

        Args:
            customer_id: Customer identifier.

        Returns:
            Customer entity if found, None otherwise.
        """
        model = await self._get_model(customer_id)
        if model is None:
            return None

        return self._to_entity(model)

    async def find_all(self) -> list[Customer]:
        """List all customers by creation time, then id."""
        stmt = select(CustomerModel).order_by(CustomerModel.created_at, CustomerModel.id)
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(m) for m in models]

    async def _get_model(self, customer_id: str) -> CustomerModel | None:
        stmt = select(CustomerModel).where(CustomerModel.id == customer_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _address_columns(
        address: Address | None,
    ) -> tuple[str | None, int | None, str | None, str | None]:
        if address is None:
            return None, None, None, None
        return address.street, address.number, address.zip_code, address.city

    def _to_entity(self, model: CustomerModel) -> Customer:
        """Map database model to domain entity.

        Args:
            model: Database model.

        Returns:
            Domain entity.
        """
        address = None
        if model.street is not None:
            address = Address(
                street=model.street,
                number=model.number or 0,
                zip_code=model.zip_code or "",
                city=model.city or "",
            )

        return Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=model.active,
            reward_points=model.reward_points,
        )

    def _to_model(self, entity: Customer) -> CustomerModel:
        """Map domain entity to database model.

        Args:
            entity: Domain entity.

        Returns:
            Database model.
        """
        street, number, zip_code, city = self._address_columns(entity.address)
        return CustomerModel(
            id=entity.id,
            name=entity.name,
            street=street,
            number=number,
            zip_code=zip_code,
            city=city,
            active=entity.active,
            reward_points=entity.reward_points,
        )
