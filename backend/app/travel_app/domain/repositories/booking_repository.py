"""Abstract repository interface for Booking entities."""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from ..entities.booking import Booking


class BookingRepository(ABC):
    """Abstract repository for Booking persistence operations."""

    @abstractmethod
    async def count_for_bundle(self, bundle_id: UUID) -> int:
        """Count bookings already made for a bundle.

        Used to enforce bundle capacity before accepting a new booking.
        """
        pass

    @abstractmethod
    async def get_for_bundle(self, bundle_id: UUID) -> List[Booking]:
        """Retrieve all bookings of a bundle, oldest first.

        Args:
            bundle_id: The bundle to list bookings for.

        Returns:
            List of Booking entities.
        """
        pass

    @abstractmethod
    async def save(self, booking: Booking) -> Booking:
        """Persist a new booking.

        Args:
            booking: The Booking entity to save.

        Returns:
            The saved Booking entity.
        """
        pass
