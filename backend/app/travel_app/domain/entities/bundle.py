"""Bundle entity representing a bookable excursion package."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4

from app.travel_app.domain.value_objects import Name


class ExcursionType(Enum):
    """Kind of excursion a bundle offers; values are the storage tokens."""

    CRUISE = "cruise"
    ROADTRIP = "roadtrip"
    INDEPENDENT = "independent"


@dataclass
class Bundle:
    """Domain entity representing an excursion bundle offered by the agency.

    Attributes:
        destination: Where the excursion goes.
        hotel: Hotel the travellers stay at.
        excursion_type: Cruise, road trip or independent travel.
        departs_at: Departure timestamp.
        returns_at: Return timestamp (must be after departure).
        price: Price per traveller (non-negative).
        capacity: Maximum number of bookings (at least one).
        id: Unique identifier, generated for new bundles.
    """

    destination: Name
    hotel: Name
    excursion_type: ExcursionType
    departs_at: datetime
    returns_at: datetime
    price: Decimal
    capacity: int
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.returns_at <= self.departs_at:
            raise ValueError("Bundle must return after it departs")
        if self.price < 0:
            raise ValueError("Bundle price cannot be negative")
        if self.capacity < 1:
            raise ValueError("Bundle capacity must be at least 1")

    def has_capacity_for(self, booked: int) -> bool:
        """Check whether another booking fits given the current booking count.

        Args:
            booked: Number of bookings already made for this bundle.

        Returns:
            True if at least one seat is still free.
        """
        return booked < self.capacity

    @property
    def duration_days(self) -> int:
        return (self.returns_at - self.departs_at).days
