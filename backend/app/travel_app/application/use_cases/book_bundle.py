"""Use cases for booking bundles and listing a bundle's bookings.

Implements booking by orchestrating:
- Locked bundle lookup and capacity check via BundleRepository/BookingRepository
- Customer validation via the domain value objects
- Customer reuse by email via CustomerRepository
- Booking persistence via BookingRepository
"""

import logging
from uuid import UUID

from app.travel_app.application.dto.bundle_dto import BookingDTO, BookingPreviewDTO
from app.travel_app.application.dto.customer_dto import RegisterCustomerRequest
from app.travel_app.application.exceptions import (
    BookingAlreadyExistsError,
    BundleFullError,
    BundleNotFoundError,
)
from app.travel_app.application.use_cases.register_customer import build_customer
from app.travel_app.domain.entities.booking import Booking
from app.travel_app.domain.entities.customer import Customer
from app.travel_app.domain.repositories.booking_repository import BookingRepository
from app.travel_app.domain.repositories.bundle_repository import BundleRepository
from app.travel_app.domain.repositories.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class BookBundleUseCase:
    """Application service for booking a bundle on behalf of a traveller.

    The traveller's details are validated first. A customer already known
    by email is reused as stored; otherwise a new customer is registered.
    The bundle row stays locked from the seat count until the transaction
    ends, so concurrent bookings cannot overfill it.
    """

    def __init__(
        self,
        bundle_repository: BundleRepository,
        customer_repository: CustomerRepository,
        booking_repository: BookingRepository,
    ) -> None:
        """Initialize the use case with required dependencies.

        Args:
            bundle_repository: Repository for bundle lookup.
            customer_repository: Repository for customer lookup and persistence.
            booking_repository: Repository for booking persistence.
        """
        self._bundle_repository = bundle_repository
        self._customer_repository = customer_repository
        self._booking_repository = booking_repository

    async def execute(self, bundle_id: UUID, request: RegisterCustomerRequest) -> BookingDTO:
        """Execute the booking.

        Args:
            bundle_id: The bundle to book.
            request: Traveller details as entered in the form.

        Returns:
            BookingDTO for the new booking.

        Raises:
            InvalidInputError: If any traveller field fails validation.
            BundleNotFoundError: If the bundle does not exist.
            BundleFullError: If the bundle has no free seats.
            BookingAlreadyExistsError: If this customer already booked the bundle.
        """
        # 1. Validate the traveller before touching storage
        candidate = build_customer(request)

        # 2. Lock the bundle row, then check capacity under the lock
        bundle = await self._bundle_repository.get_by_id_for_update(bundle_id)
        if bundle is None:
            raise BundleNotFoundError(bundle_id)

        booked = await self._booking_repository.count_for_bundle(bundle_id)
        if not bundle.has_capacity_for(booked):
            raise BundleFullError(bundle_id, bundle.capacity)

        # 3. Reuse an existing customer or register the new one
        customer = await self._customer_repository.get_by_email(candidate.email)
        if customer is None:
            customer = await self._customer_repository.save(candidate)
            logger.info(f"Registered customer {customer.id} while booking")
        else:
            existing = await self._booking_repository.get_for_bundle(bundle_id)
            if any(b.customer_id == customer.id for b in existing):
                raise BookingAlreadyExistsError(bundle_id, str(customer.email))
            self._log_reuse(customer, candidate)

        # 4. Persist the booking
        booking = await self._booking_repository.save(
            Booking(bundle_id=bundle_id, customer_id=customer.id)
        )
        logger.info(f"Booked bundle {bundle_id} for customer {customer.id}")

        return BookingDTO(
            id=booking.id,
            bundle_id=booking.bundle_id,
            customer_id=booking.customer_id,
            booked_at=booking.booked_at,
        )

    @staticmethod
    def _log_reuse(customer: Customer, candidate: Customer) -> None:
        """Record that a stored customer was booked instead of the submitted one."""
        differing = [
            field
            for field in ("first_name", "last_name", "phone", "address", "gender")
            if getattr(customer, field) != getattr(candidate, field)
        ]
        if differing:
            logger.warning(
                f"Booking for existing customer {customer.id}; submitted "
                f"{', '.join(differing)} differ from the stored record and were not saved"
            )
        else:
            logger.info(f"Booking for existing customer {customer.id}")


class GetBundleBookingsUseCase:
    """Application service listing who booked a bundle."""

    def __init__(
        self,
        bundle_repository: BundleRepository,
        customer_repository: CustomerRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._bundle_repository = bundle_repository
        self._customer_repository = customer_repository
        self._booking_repository = booking_repository

    async def execute(self, bundle_id: UUID) -> list[BookingPreviewDTO]:
        """Execute the booking listing.

        Args:
            bundle_id: The bundle whose bookings to list.

        Returns:
            One preview per booking, oldest first.

        Raises:
            BundleNotFoundError: If the bundle does not exist.
        """
        bundle = await self._bundle_repository.get_by_id(bundle_id)
        if bundle is None:
            raise BundleNotFoundError(bundle_id)

        bookings = await self._booking_repository.get_for_bundle(bundle_id)

        previews: list[BookingPreviewDTO] = []
        for booking in bookings:
            customer = await self._customer_repository.get_by_id(booking.customer_id)
            if customer is None:
                # Foreign key guarantees the customer exists
                continue
            previews.append(
                BookingPreviewDTO(
                    booking_id=booking.id,
                    customer_id=customer.id,
                    customer_name=customer.full_name,
                    customer_email=str(customer.email),
                    booked_at=booking.booked_at,
                )
            )

        return previews
