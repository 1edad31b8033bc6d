"""Data transfer objects for application layer."""

from app.travel_app.application.dto.bundle_dto import (
    BookingDTO,
    BookingPreviewDTO,
    BundleDTO,
    BundleListDTO,
)
from app.travel_app.application.dto.customer_dto import (
    CustomerDTO,
    RegisterCustomerRequest,
    ValidationErrorDTO,
)

__all__ = [
    # Customer DTOs
    "RegisterCustomerRequest",
    "CustomerDTO",
    "ValidationErrorDTO",
    # Bundle DTOs
    "BundleDTO",
    "BundleListDTO",
    "BookingDTO",
    "BookingPreviewDTO",
]
