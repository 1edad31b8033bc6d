"""Application-layer exceptions for use case error handling.

These exceptions represent business logic errors that can occur during
use case execution. They are designed to be caught and mapped to
appropriate HTTP responses by the presentation layer.

Stored data that fails validation on load is not reported here; that is
``CorruptDatabaseObjectException`` and is never converted into one of
these recoverable errors.
"""

from uuid import UUID

from app.travel_app.domain.validation import ValidationErrors


class ApplicationError(Exception):
    """Base class for all application-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidInputError(ApplicationError):
    """Raised when one or more user-entered fields fail validation."""

    def __init__(self, errors: ValidationErrors) -> None:
        super().__init__(message=errors.render(), code="INVALID_INPUT")
        self.errors = errors


class CustomerNotFoundError(ApplicationError):
    """Raised when a requested customer does not exist."""

    def __init__(self, customer_id: UUID) -> None:
        super().__init__(
            message=f"Customer '{customer_id}' not found",
            code="CUSTOMER_NOT_FOUND"
        )
        self.customer_id = customer_id


class CustomerAlreadyExistsError(ApplicationError):
    """Raised when registering an email that already belongs to a customer."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message=f"A customer with email '{email}' is already registered",
            code="CUSTOMER_ALREADY_EXISTS"
        )
        self.email = email


class BundleNotFoundError(ApplicationError):
    """Raised when a requested bundle does not exist."""

    def __init__(self, bundle_id: UUID) -> None:
        super().__init__(
            message=f"Bundle '{bundle_id}' not found",
            code="BUNDLE_NOT_FOUND"
        )
        self.bundle_id = bundle_id


class BundleFullError(ApplicationError):
    """Raised when a bundle has no free capacity left."""

    def __init__(self, bundle_id: UUID, capacity: int) -> None:
        super().__init__(
            message=f"Bundle '{bundle_id}' is fully booked ({capacity} seats)",
            code="BUNDLE_FULL"
        )
        self.bundle_id = bundle_id
        self.capacity = capacity


class BookingAlreadyExistsError(ApplicationError):
    """Raised when a customer books the same bundle twice."""

    def __init__(self, bundle_id: UUID, email: str) -> None:
        super().__init__(
            message=f"'{email}' has already booked bundle '{bundle_id}'",
            code="BOOKING_ALREADY_EXISTS"
        )
        self.bundle_id = bundle_id
        self.email = email
