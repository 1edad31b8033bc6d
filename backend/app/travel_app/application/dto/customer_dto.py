"""Data Transfer Objects for customer registration requests and responses.

Request fields are plain strings on purpose: format rules live in the
domain value objects, which report every invalid field at once.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.travel_app.domain.entities.customer import Gender


class RegisterCustomerRequest(BaseModel):
    """Request payload for registering a customer."""

    first_name: str = Field(description="Given name, letters and spaces only")
    last_name: str = Field(description="Family name, letters and spaces only")
    email: str = Field(description="Contact email address")
    phone: str = Field(description="Contact phone, e.g. '555-123-4567'")
    address: str = Field(description="Address as 'Street 123, City, Region'")
    gender: Gender = Field(description="Customer gender: 'male' or 'female'")


class CustomerDTO(BaseModel):
    """Customer data for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="Unique customer identifier")
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    gender: Gender
    registered_at: datetime = Field(description="When the customer registered (UTC)")


class ValidationErrorDTO(BaseModel):
    """Body returned when user input fails validation."""

    message: str = Field(description="All validation messages folded into one")
    errors: list[str] = Field(description="One message per invalid field, in field order")
