"""Helpers for turning application errors into HTTP responses."""

from fastapi import HTTPException, status

from app.travel_app.application.dto.customer_dto import ValidationErrorDTO
from app.travel_app.application.exceptions import InvalidInputError


def invalid_input_exception(error: InvalidInputError) -> HTTPException:
    """Build a 422 response carrying every field-level validation message."""
    body = ValidationErrorDTO(message=error.message, errors=error.errors.messages)
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=body.model_dump(),
    )
