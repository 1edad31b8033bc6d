"""Abstract repository interface for Bundle entities."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.bundle import Bundle, ExcursionType


class BundleRepository(ABC):
    """Abstract repository for Bundle persistence operations."""

    @abstractmethod
    async def get_by_id(self, bundle_id: UUID) -> Optional[Bundle]:
        """Retrieve a bundle by identifier.

        Args:
            bundle_id: The unique identifier of the bundle.

        Returns:
            The Bundle entity if found, None otherwise.
        """
        pass

    @abstractmethod
    async def get_by_id_for_update(self, bundle_id: UUID) -> Optional[Bundle]:
        """Retrieve a bundle and lock it until the current transaction ends.

        Concurrent bookings of the same bundle wait on this lock, so the
        seat count read after it stays accurate until the booking is saved.

        Args:
            bundle_id: The unique identifier of the bundle.

        Returns:
            The Bundle entity if found, None otherwise.
        """
        pass

    @abstractmethod
    async def list_bundles(
        self,
        excursion_type: Optional[ExcursionType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Bundle]:
        """List bundles ordered by departure, optionally filtered by type.

        Args:
            excursion_type: Only return bundles of this type when given.
            limit: Maximum number of bundles to return.
            offset: Number of bundles to skip.

        Returns:
            List of Bundle entities.
        """
        pass

    @abstractmethod
    async def save(self, bundle: Bundle) -> Bundle:
        """Persist a bundle entity, inserting or updating by id."""
        pass
