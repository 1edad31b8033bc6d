"""Booking entity linking a customer to a bundle."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from app.travel_app.domain.entities.clock import utc_now


@dataclass
class Booking:
    """A customer's reservation on a bundle.

    Attributes:
        bundle_id: The booked bundle.
        customer_id: The customer who booked.
        id: Unique identifier, generated for new bookings.
        booked_at: Timestamp of the booking, millisecond precision.
    """

    bundle_id: UUID
    customer_id: UUID
    id: UUID = field(default_factory=uuid4)
    booked_at: datetime = field(default_factory=utc_now)
