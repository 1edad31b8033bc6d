"""Use cases for browsing excursion bundles."""

from typing import Optional
from uuid import UUID

from app.travel_app.application.dto.bundle_dto import BundleDTO, BundleListDTO
from app.travel_app.application.exceptions import BundleNotFoundError
from app.travel_app.domain.entities.bundle import Bundle, ExcursionType
from app.travel_app.domain.repositories.booking_repository import BookingRepository
from app.travel_app.domain.repositories.bundle_repository import BundleRepository


def to_bundle_dto(bundle: Bundle, booked: Optional[int] = None) -> BundleDTO:
    """Build BundleDTO from a Bundle entity.

    Args:
        bundle: The bundle to present.
        booked: Current number of bookings, if known.

    Returns:
        BundleDTO, with ``seats_left`` filled in when ``booked`` is given.
    """
    return BundleDTO(
        id=bundle.id,
        destination=str(bundle.destination),
        hotel=str(bundle.hotel),
        excursion_type=bundle.excursion_type,
        departs_at=bundle.departs_at,
        returns_at=bundle.returns_at,
        duration_days=bundle.duration_days,
        price=bundle.price,
        capacity=bundle.capacity,
        seats_left=None if booked is None else max(bundle.capacity - booked, 0),
    )


class ListBundlesUseCase:
    """Application service for paging through available bundles."""

    def __init__(self, bundle_repository: BundleRepository) -> None:
        self._bundle_repository = bundle_repository

    async def execute(
        self,
        excursion_type: Optional[ExcursionType] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> BundleListDTO:
        """Execute the listing.

        Args:
            excursion_type: Optional filter on excursion type.
            page: Page number (1-indexed).
            page_size: Number of bundles per page.

        Returns:
            BundleListDTO for the requested page.
        """
        bundles = await self._bundle_repository.list_bundles(
            excursion_type=excursion_type,
            limit=page_size,
            offset=(page - 1) * page_size,
        )
        return BundleListDTO(
            bundles=[to_bundle_dto(b) for b in bundles],
            page=page,
            page_size=page_size,
        )


class GetBundleUseCase:
    """Application service for showing one bundle with its free seats."""

    def __init__(
        self,
        bundle_repository: BundleRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._bundle_repository = bundle_repository
        self._booking_repository = booking_repository

    async def execute(self, bundle_id: UUID) -> BundleDTO:
        """Execute the lookup.

        Raises:
            BundleNotFoundError: If no bundle has this id.
        """
        bundle = await self._bundle_repository.get_by_id(bundle_id)
        if bundle is None:
            raise BundleNotFoundError(bundle_id)

        booked = await self._booking_repository.count_for_bundle(bundle_id)
        return to_bundle_dto(bundle, booked)
