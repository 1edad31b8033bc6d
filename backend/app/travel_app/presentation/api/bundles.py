"""Bundle browsing and booking API endpoints.

- GET /api/bundles - List bundles (optionally by excursion type)
- GET /api/bundles/{bundle_id} - Get a single bundle with free seats
- POST /api/bundles/{bundle_id}/bookings - Book a bundle for a traveller
- GET /api/bundles/{bundle_id}/bookings - List a bundle's bookings
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.travel_app.application.dto.bundle_dto import (
    BookingDTO,
    BookingPreviewDTO,
    BundleDTO,
    BundleListDTO,
)
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
from app.travel_app.application.use_cases.browse_bundles import (
    GetBundleUseCase,
    ListBundlesUseCase,
)
from app.travel_app.domain.entities.bundle import ExcursionType
from app.travel_app.infrastructure.db.session import get_db_session
from app.travel_app.infrastructure.repositories.sql_booking_repository import (
    SqlBookingRepository,
)
from app.travel_app.infrastructure.repositories.sql_bundle_repository import (
    SqlBundleRepository,
)
from app.travel_app.infrastructure.repositories.sql_customer_repository import (
    SqlCustomerRepository,
)
from app.travel_app.presentation.api.errors import invalid_input_exception

router = APIRouter()


@router.get("/bundles", response_model=BundleListDTO)
async def list_bundles(
    excursion_type: Annotated[
        Optional[ExcursionType], Query(description="Filter by excursion type")
    ] = None,
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    page_size: Annotated[
        Optional[int], Query(ge=1, le=100, description="Items per page")
    ] = None,
    session: AsyncSession = Depends(get_db_session),
) -> BundleListDTO:
    """List bundles ordered by departure date."""
    use_case = ListBundlesUseCase(bundle_repository=SqlBundleRepository(session))
    return await use_case.execute(
        excursion_type=excursion_type,
        page=page,
        page_size=page_size or get_settings().bundle_page_size,
    )


@router.get("/bundles/{bundle_id}", response_model=BundleDTO)
async def get_bundle(
    bundle_id: Annotated[UUID, Path(description="Bundle ID")],
    session: AsyncSession = Depends(get_db_session),
) -> BundleDTO:
    """Get a single bundle including its remaining seats.

    Raises:
        HTTPException: 404 if the bundle does not exist.
    """
    use_case = GetBundleUseCase(
        bundle_repository=SqlBundleRepository(session),
        booking_repository=SqlBookingRepository(session),
    )

    try:
        return await use_case.execute(bundle_id)
    except BundleNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        ) from e


@router.post(
    "/bundles/{bundle_id}/bookings",
    response_model=BookingDTO,
    status_code=status.HTTP_201_CREATED,
)
async def book_bundle(
    bundle_id: Annotated[UUID, Path(description="Bundle ID")],
    request: RegisterCustomerRequest,
    session: AsyncSession = Depends(get_db_session),
) -> BookingDTO:
    """Book a bundle for the traveller described in the request.

    Args:
        bundle_id: The bundle to book.
        request: Traveller details as entered in the booking form.
        session: Database session (injected).

    Returns:
        BookingDTO for the new booking.

    Raises:
        HTTPException: 422 if traveller details are invalid.
        HTTPException: 404 if the bundle does not exist.
        HTTPException: 409 if the bundle is full, already booked by this customer,
            or a concurrent request stored the same customer or booking first.
    """
    use_case = BookBundleUseCase(
        bundle_repository=SqlBundleRepository(session),
        customer_repository=SqlCustomerRepository(session),
        booking_repository=SqlBookingRepository(session),
    )

    try:
        result = await use_case.execute(bundle_id, request)
        await session.commit()
        return result
    except InvalidInputError as e:
        raise invalid_input_exception(e) from e
    except BundleNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        ) from e
    except (BundleFullError, BookingAlreadyExistsError) as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message,
        ) from e
    except IntegrityError as e:
        # A concurrent request stored the same customer email or booking first
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Booking conflicts with a concurrent booking; please retry",
        ) from e


@router.get("/bundles/{bundle_id}/bookings", response_model=list[BookingPreviewDTO])
async def list_bundle_bookings(
    bundle_id: Annotated[UUID, Path(description="Bundle ID")],
    session: AsyncSession = Depends(get_db_session),
) -> list[BookingPreviewDTO]:
    """List the bookings of a bundle, oldest first.

    Raises:
        HTTPException: 404 if the bundle does not exist.
    """
    use_case = GetBundleBookingsUseCase(
        bundle_repository=SqlBundleRepository(session),
        customer_repository=SqlCustomerRepository(session),
        booking_repository=SqlBookingRepository(session),
    )

    try:
        return await use_case.execute(bundle_id)
    except BundleNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        ) from e
