"""Unit tests for BookBundleUseCase and GetBundleBookingsUseCase."""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from app.travel_app.application.dto.customer_dto import RegisterCustomerRequest
from app.travel_app.application.exceptions import (
    BookingAlreadyExistsError,
    BundleFullError,
    BundleNotFoundError,
    InvalidInputError,
)
from app.travel_app.application.use_cases.book_bundle import (
    BookBundleUseCase,
    GetBundleBookingsUseCase,
)
from app.travel_app.domain.entities import Booking, Bundle, Customer, ExcursionType, Gender
from app.travel_app.domain.value_objects import Address, Email, Name, Phone

BOOK_BUNDLE_LOGGER = "app.travel_app.application.use_cases.book_bundle"


@pytest.fixture
def sample_bundle() -> Bundle:
    """Create a sample bundle with two seats."""
    departs_at = datetime(2025, 6, 1, tzinfo=timezone.utc)
    return Bundle(
        destination=Name("Santorini"),
        hotel=Name("Blue Dome"),
        excursion_type=ExcursionType.CRUISE,
        departs_at=departs_at,
        returns_at=departs_at + timedelta(days=7),
        price=Decimal("1200.00"),
        capacity=2,
    )


@pytest.fixture
def sample_customer() -> Customer:
    """Create a sample customer for testing."""
    return Customer(
        first_name=Name("Jane"),
        last_name=Name("Doe"),
        email=Email("jane@example.com"),
        phone=Phone("555-987-6543"),
        address=Address("Elm 7, Athens, Attica"),
        gender=Gender.FEMALE,
    )


@pytest.fixture
def booking_request() -> RegisterCustomerRequest:
    """Create a valid booking form."""
    return RegisterCustomerRequest(
        first_name="Jane",
        last_name="Doe",
        email="jane@example.com",
        phone="555-987-6543",
        address="Elm 7, Athens, Attica",
        gender=Gender.FEMALE,
    )


@pytest.fixture
def mock_bundle_repository(sample_bundle: Bundle) -> AsyncMock:
    repository = AsyncMock()
    repository.get_by_id.return_value = sample_bundle
    repository.get_by_id_for_update.return_value = sample_bundle
    return repository


@pytest.fixture
def mock_customer_repository() -> AsyncMock:
    repository = AsyncMock()
    repository.get_by_email.return_value = None
    repository.save.side_effect = lambda customer: customer
    return repository


@pytest.fixture
def mock_booking_repository() -> AsyncMock:
    repository = AsyncMock()
    repository.count_for_bundle.return_value = 0
    repository.get_for_bundle.return_value = []
    repository.save.side_effect = lambda booking: booking
    return repository


@pytest.fixture
def book_use_case(
    mock_bundle_repository: AsyncMock,
    mock_customer_repository: AsyncMock,
    mock_booking_repository: AsyncMock,
) -> BookBundleUseCase:
    """Create the BookBundleUseCase with mocked dependencies."""
    return BookBundleUseCase(
        bundle_repository=mock_bundle_repository,
        customer_repository=mock_customer_repository,
        booking_repository=mock_booking_repository,
    )


class LockingBundleRepository:
    """In-memory bundle store whose row lock is held until the transaction ends."""

    def __init__(self, bundle: Bundle, row_lock: asyncio.Lock) -> None:
        self._bundle = bundle
        self._row_lock = row_lock

    async def get_by_id(self, bundle_id: UUID) -> Bundle:
        await asyncio.sleep(0)
        return self._bundle

    async def get_by_id_for_update(self, bundle_id: UUID) -> Bundle:
        await self._row_lock.acquire()
        return self._bundle


class InMemoryBookingRepository:
    """Booking store that yields to the event loop on every call."""

    def __init__(self) -> None:
        self.rows: list[Booking] = []

    async def count_for_bundle(self, bundle_id: UUID) -> int:
        await asyncio.sleep(0)
        return sum(1 for b in self.rows if b.bundle_id == bundle_id)

    async def get_for_bundle(self, bundle_id: UUID) -> list[Booking]:
        await asyncio.sleep(0)
        return [b for b in self.rows if b.bundle_id == bundle_id]

    async def save(self, booking: Booking) -> Booking:
        await asyncio.sleep(0)
        self.rows.append(booking)
        return booking


class TestBookBundleUseCase:
    """Tests for BookBundleUseCase."""

    @pytest.mark.asyncio
    async def test_execute_books_for_new_customer(
        self,
        book_use_case: BookBundleUseCase,
        mock_customer_repository: AsyncMock,
        mock_booking_repository: AsyncMock,
        sample_bundle: Bundle,
        booking_request: RegisterCustomerRequest,
    ) -> None:
        """Test a first-time traveller is registered and booked."""
        result = await book_use_case.execute(sample_bundle.id, booking_request)

        assert result.bundle_id == sample_bundle.id
        mock_customer_repository.save.assert_awaited_once()
        saved_customer = mock_customer_repository.save.await_args.args[0]
        assert result.customer_id == saved_customer.id
        mock_booking_repository.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_execute_reuses_known_customer(
        self,
        book_use_case: BookBundleUseCase,
        mock_customer_repository: AsyncMock,
        sample_bundle: Bundle,
        sample_customer: Customer,
        booking_request: RegisterCustomerRequest,
    ) -> None:
        mock_customer_repository.get_by_email.return_value = sample_customer

        result = await book_use_case.execute(sample_bundle.id, booking_request)

        assert result.customer_id == sample_customer.id
        mock_customer_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_execute_rejects_invalid_traveller_before_lookup(
        self,
        book_use_case: BookBundleUseCase,
        mock_bundle_repository: AsyncMock,
        sample_bundle: Bundle,
        booking_request: RegisterCustomerRequest,
    ) -> None:
        bad_request = booking_request.model_copy(
            update={"first_name": "J4ne", "phone": "call me"}
        )

        with pytest.raises(InvalidInputError) as exc_info:
            await book_use_case.execute(sample_bundle.id, bad_request)

        assert len(exc_info.value.errors) == 2
        mock_bundle_repository.get_by_id_for_update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_execute_raises_bundle_not_found(
        self,
        book_use_case: BookBundleUseCase,
        mock_bundle_repository: AsyncMock,
        booking_request: RegisterCustomerRequest,
    ) -> None:
        mock_bundle_repository.get_by_id_for_update.return_value = None
        missing_id = uuid4()

        with pytest.raises(BundleNotFoundError) as exc_info:
            await book_use_case.execute(missing_id, booking_request)

        assert exc_info.value.bundle_id == missing_id

    @pytest.mark.asyncio
    async def test_execute_rejects_full_bundle(
        self,
        book_use_case: BookBundleUseCase,
        mock_booking_repository: AsyncMock,
        sample_bundle: Bundle,
        booking_request: RegisterCustomerRequest,
    ) -> None:
        mock_booking_repository.count_for_bundle.return_value = 2

        with pytest.raises(BundleFullError) as exc_info:
            await book_use_case.execute(sample_bundle.id, booking_request)

        assert exc_info.value.capacity == 2
        mock_booking_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_execute_rejects_double_booking(
        self,
        book_use_case: BookBundleUseCase,
        mock_customer_repository: AsyncMock,
        mock_booking_repository: AsyncMock,
        sample_bundle: Bundle,
        sample_customer: Customer,
        booking_request: RegisterCustomerRequest,
    ) -> None:
        mock_customer_repository.get_by_email.return_value = sample_customer
        mock_booking_repository.get_for_bundle.return_value = [
            Booking(bundle_id=sample_bundle.id, customer_id=sample_customer.id)
        ]

        with pytest.raises(BookingAlreadyExistsError):
            await book_use_case.execute(sample_bundle.id, booking_request)

        mock_booking_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_execute_counts_seats_under_bundle_lock(
        self,
        book_use_case: BookBundleUseCase,
        mock_bundle_repository: AsyncMock,
        sample_bundle: Bundle,
        booking_request: RegisterCustomerRequest,
    ) -> None:
        await book_use_case.execute(sample_bundle.id, booking_request)

        mock_bundle_repository.get_by_id_for_update.assert_awaited_once_with(sample_bundle.id)
        mock_bundle_repository.get_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_bookings_cannot_overfill_bundle(
        self,
        mock_customer_repository: AsyncMock,
        sample_bundle: Bundle,
        booking_request: RegisterCustomerRequest,
    ) -> None:
        """Test two travellers racing for the last seat get one booking between them."""
        sample_bundle.capacity = 1
        row_lock = asyncio.Lock()
        bookings = InMemoryBookingRepository()
        use_case = BookBundleUseCase(
            bundle_repository=LockingBundleRepository(sample_bundle, row_lock),
            customer_repository=mock_customer_repository,
            booking_repository=bookings,
        )

        async def book_in_transaction(email: str):
            request = booking_request.model_copy(update={"email": email})
            try:
                return await use_case.execute(sample_bundle.id, request)
            finally:
                # Commit or rollback releases the row lock
                if row_lock.locked():
                    row_lock.release()

        results = await asyncio.gather(
            book_in_transaction("jane@example.com"),
            book_in_transaction("john@example.com"),
            return_exceptions=True,
        )

        assert len(bookings.rows) == 1
        assert sorted(type(r).__name__ for r in results) == ["BookingDTO", "BundleFullError"]

    @pytest.mark.asyncio
    async def test_execute_logs_reuse_of_known_customer(
        self,
        book_use_case: BookBundleUseCase,
        mock_customer_repository: AsyncMock,
        sample_bundle: Bundle,
        sample_customer: Customer,
        booking_request: RegisterCustomerRequest,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        mock_customer_repository.get_by_email.return_value = sample_customer

        with caplog.at_level(logging.INFO, logger=BOOK_BUNDLE_LOGGER):
            await book_use_case.execute(sample_bundle.id, booking_request)

        assert f"Booking for existing customer {sample_customer.id}" in caplog.text
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    @pytest.mark.asyncio
    async def test_execute_warns_when_known_customer_details_differ(
        self,
        book_use_case: BookBundleUseCase,
        mock_customer_repository: AsyncMock,
        mock_booking_repository: AsyncMock,
        sample_bundle: Bundle,
        sample_customer: Customer,
        booking_request: RegisterCustomerRequest,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test submitted details that disagree with the stored customer are reported."""
        mock_customer_repository.get_by_email.return_value = sample_customer
        changed_request = booking_request.model_copy(
            update={"phone": "555-000-1111", "address": "Oak 9, Patras, Achaea"}
        )

        with caplog.at_level(logging.INFO, logger=BOOK_BUNDLE_LOGGER):
            result = await book_use_case.execute(sample_bundle.id, changed_request)

        assert result.customer_id == sample_customer.id
        mock_customer_repository.save.assert_not_awaited()
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "phone, address differ from the stored record" in warnings[0].getMessage()


class TestGetBundleBookingsUseCase:
    """Tests for GetBundleBookingsUseCase."""

    @pytest.mark.asyncio
    async def test_execute_lists_previews(
        self,
        mock_bundle_repository: AsyncMock,
        mock_customer_repository: AsyncMock,
        mock_booking_repository: AsyncMock,
        sample_bundle: Bundle,
        sample_customer: Customer,
    ) -> None:
        booking = Booking(bundle_id=sample_bundle.id, customer_id=sample_customer.id)
        mock_booking_repository.get_for_bundle.return_value = [booking]
        mock_customer_repository.get_by_id.return_value = sample_customer
        use_case = GetBundleBookingsUseCase(
            bundle_repository=mock_bundle_repository,
            customer_repository=mock_customer_repository,
            booking_repository=mock_booking_repository,
        )

        previews = await use_case.execute(sample_bundle.id)

        assert len(previews) == 1
        assert previews[0].booking_id == booking.id
        assert previews[0].customer_name == "Jane Doe"
        assert previews[0].customer_email == "jane@example.com"

    @pytest.mark.asyncio
    async def test_execute_raises_bundle_not_found(
        self,
        mock_bundle_repository: AsyncMock,
        mock_customer_repository: AsyncMock,
        mock_booking_repository: AsyncMock,
    ) -> None:
        mock_bundle_repository.get_by_id.return_value = None
        use_case = GetBundleBookingsUseCase(
            bundle_repository=mock_bundle_repository,
            customer_repository=mock_customer_repository,
            booking_repository=mock_booking_repository,
        )

        with pytest.raises(BundleNotFoundError):
            await use_case.execute(uuid4())
