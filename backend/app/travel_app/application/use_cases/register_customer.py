"""Use cases for registering and looking up customers.

Registration validates every user-entered field through the domain value
objects and reports all invalid fields together.
"""

import logging
from uuid import UUID

from app.travel_app.application.dto.customer_dto import CustomerDTO, RegisterCustomerRequest
from app.travel_app.application.exceptions import (
    CustomerAlreadyExistsError,
    CustomerNotFoundError,
    InvalidInputError,
)
from app.travel_app.domain.entities.customer import Customer
from app.travel_app.domain.repositories.customer_repository import CustomerRepository
from app.travel_app.domain.validation import Invalid, collect
from app.travel_app.domain.value_objects import Address, Email, Name, Phone

logger = logging.getLogger(__name__)


def build_customer(request: RegisterCustomerRequest) -> Customer:
    """Create a new Customer entity from raw registration input.

    Args:
        request: Unvalidated registration fields.

    Returns:
        A Customer whose value objects all passed validation.

    Raises:
        InvalidInputError: With one error per invalid field, in form order.
    """
    result = collect(
        {
            "first_name": Name.try_create(request.first_name),
            "last_name": Name.try_create(request.last_name),
            "email": Email.try_create(request.email),
            "phone": Phone.try_create(request.phone),
            "address": Address.try_create(request.address),
        }
    )
    if isinstance(result, Invalid):
        raise InvalidInputError(result.errors)

    return Customer(gender=request.gender, **result.value)


def to_customer_dto(customer: Customer) -> CustomerDTO:
    """Build CustomerDTO from a Customer entity."""
    return CustomerDTO(
        id=customer.id,
        first_name=str(customer.first_name),
        last_name=str(customer.last_name),
        email=str(customer.email),
        phone=str(customer.phone),
        address=str(customer.address),
        gender=customer.gender,
        registered_at=customer.registered_at,
    )


class RegisterCustomerUseCase:
    """Application service for registering a new customer."""

    def __init__(self, customer_repository: CustomerRepository) -> None:
        """Initialize the use case with required dependencies.

        Args:
            customer_repository: Repository for customer persistence.
        """
        self._customer_repository = customer_repository

    async def execute(self, request: RegisterCustomerRequest) -> CustomerDTO:
        """Execute the registration.

        Args:
            request: RegisterCustomerRequest with raw form fields.

        Returns:
            CustomerDTO representing the registered customer.

        Raises:
            InvalidInputError: If any field fails validation.
            CustomerAlreadyExistsError: If the email is already registered.
        """
        customer = build_customer(request)

        existing = await self._customer_repository.get_by_email(customer.email)
        if existing is not None:
            raise CustomerAlreadyExistsError(str(customer.email))

        saved = await self._customer_repository.save(customer)
        logger.info(f"Registered customer {saved.id}")
        return to_customer_dto(saved)


class GetCustomerUseCase:
    """Application service for retrieving a customer by id."""

    def __init__(self, customer_repository: CustomerRepository) -> None:
        self._customer_repository = customer_repository

    async def execute(self, customer_id: UUID) -> CustomerDTO:
        """Execute the lookup.

        Raises:
            CustomerNotFoundError: If no customer has this id.
        """
        customer = await self._customer_repository.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return to_customer_dto(customer)
