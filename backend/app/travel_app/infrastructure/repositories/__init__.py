"""SQLAlchemy repository implementations."""

from app.travel_app.infrastructure.repositories.sql_booking_repository import (
    SqlBookingRepository,
)
from app.travel_app.infrastructure.repositories.sql_bundle_repository import (
    SqlBundleRepository,
)
from app.travel_app.infrastructure.repositories.sql_customer_repository import (
    SqlCustomerRepository,
)

__all__ = [
    "SqlBookingRepository",
    "SqlBundleRepository",
    "SqlCustomerRepository",
]
