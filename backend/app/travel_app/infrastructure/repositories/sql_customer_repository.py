"""SQLAlchemy implementation of CustomerRepository."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.travel_app.domain.entities.customer import Customer
from app.travel_app.domain.repositories.customer_repository import CustomerRepository
from app.travel_app.domain.value_objects import Email
from app.travel_app.infrastructure.db.models import CustomerModel


class SqlCustomerRepository(CustomerRepository):
    """SQLAlchemy-based implementation of the CustomerRepository interface.

    Column types re-validate every stored value object on load, so reads
    may raise ``CorruptDatabaseObjectException``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with a database session.

        Args:
            session: An async SQLAlchemy session.
        """
        self._session = session

    async def get_by_id(self, customer_id: UUID) -> Optional[Customer]:
        """Retrieve a customer by identifier."""
        model = await self._session.get(CustomerModel, customer_id)
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: Email) -> Optional[Customer]:
        """Retrieve a customer by exact email address."""
        stmt = select(CustomerModel).where(CustomerModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def save(self, customer: Customer) -> Customer:
        """Persist a customer entity, inserting or updating by id."""
        model = await self._session.get(CustomerModel, customer.id)
        if model is None:
            model = self._to_model(customer)
            self._session.add(model)
        else:
            model.first_name = customer.first_name
            model.last_name = customer.last_name
            model.email = customer.email
            model.phone = customer.phone
            model.address = customer.address
            model.gender = customer.gender
            # Note: registered_at should not be updated

        await self._session.flush()
        return self._to_entity(model)

    def _to_entity(self, model: CustomerModel) -> Customer:
        """Convert a CustomerModel to a Customer domain entity."""
        return Customer(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone=model.phone,
            address=model.address,
            gender=model.gender,
            registered_at=model.registered_at,
        )

    def _to_model(self, entity: Customer) -> CustomerModel:
        """Convert a Customer domain entity to a CustomerModel."""
        return CustomerModel(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            phone=entity.phone,
            address=entity.address,
            gender=entity.gender,
            registered_at=entity.registered_at,
        )
