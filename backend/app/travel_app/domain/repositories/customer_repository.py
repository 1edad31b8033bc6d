"""Abstract repository interface for Customer entities."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from ..entities.customer import Customer
from ..value_objects import Email


class CustomerRepository(ABC):
    """Abstract repository for Customer persistence operations."""

    @abstractmethod
    async def get_by_id(self, customer_id: UUID) -> Optional[Customer]:
        """Retrieve a customer by identifier.

        Args:
            customer_id: The unique identifier of the customer.

        Returns:
            The Customer entity if found, None otherwise.

        Raises:
            CorruptDatabaseObjectException: If the stored row no longer
                satisfies the value object rules.
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: Email) -> Optional[Customer]:
        """Retrieve a customer by exact email address.

        Args:
            email: The email address to search for.

        Returns:
            The Customer entity if found, None otherwise.
        """
        pass

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """Persist a customer entity, inserting or updating by id.

        Args:
            customer: The Customer entity to save.

        Returns:
            The saved Customer entity.
        """
        pass
