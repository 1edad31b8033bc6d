"""Application layer - use cases and orchestration.

This layer contains:
- DTOs: Data Transfer Objects for API input/output
- Use Cases: Application services that orchestrate domain logic
- Exceptions: Application-level error types
"""

from app.travel_app.application.dto import (
    BookingDTO,
    BookingPreviewDTO,
    BundleDTO,
    BundleListDTO,
    CustomerDTO,
    RegisterCustomerRequest,
    ValidationErrorDTO,
)
from app.travel_app.application.exceptions import (
    ApplicationError,
    BookingAlreadyExistsError,
    BundleFullError,
    BundleNotFoundError,
    CustomerAlreadyExistsError,
    CustomerNotFoundError,
    InvalidInputError,
)
from app.travel_app.application.use_cases import (
    BookBundleUseCase,
    GetBundleBookingsUseCase,
    GetBundleUseCase,
    GetCustomerUseCase,
    ListBundlesUseCase,
    RegisterCustomerUseCase,
)

__all__ = [
    # DTOs
    "RegisterCustomerRequest",
    "CustomerDTO",
    "ValidationErrorDTO",
    "BundleDTO",
    "BundleListDTO",
    "BookingDTO",
    "BookingPreviewDTO",
    # Use Cases
    "RegisterCustomerUseCase",
    "GetCustomerUseCase",
    "ListBundlesUseCase",
    "GetBundleUseCase",
    "BookBundleUseCase",
    "GetBundleBookingsUseCase",
    # Exceptions
    "ApplicationError",
    "InvalidInputError",
    "CustomerNotFoundError",
    "CustomerAlreadyExistsError",
    "BundleNotFoundError",
    "BundleFullError",
    "BookingAlreadyExistsError",
]
