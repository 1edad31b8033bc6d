# Domain layer - pure business rules, no framework dependencies

from app.travel_app.domain.entities import (
    Booking,
    Bundle,
    Customer,
    ExcursionType,
    Gender,
)
from app.travel_app.domain.validation import (
    Invalid,
    Valid,
    Validated,
    ValidationError,
    ValidationErrors,
    collect,
    fold_validation_errors,
)
from app.travel_app.domain.value_objects import Address, Email, Name, Phone

__all__ = [
    # Entities and enums
    "Booking",
    "Bundle",
    "Customer",
    "ExcursionType",
    "Gender",
    # Value objects
    "Address",
    "Email",
    "Name",
    "Phone",
    # Validation results
    "Valid",
    "Invalid",
    "Validated",
    "ValidationError",
    "ValidationErrors",
    "collect",
    "fold_validation_errors",
]
