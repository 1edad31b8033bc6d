"""Domain repository interfaces for the travel app.

Concrete implementations live in the infrastructure layer
(backend/app/travel_app/infrastructure/repositories/). All methods are
async so they can be backed by non-blocking database drivers.
"""

from app.travel_app.domain.repositories.booking_repository import BookingRepository
from app.travel_app.domain.repositories.bundle_repository import BundleRepository
from app.travel_app.domain.repositories.customer_repository import CustomerRepository

__all__ = [
    "BookingRepository",
    "BundleRepository",
    "CustomerRepository",
]
