"""Data Transfer Objects for bundle browsing and booking."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.travel_app.domain.entities.bundle import ExcursionType


class BundleDTO(BaseModel):
    """Bundle data for API responses."""

    model_config = ConfigDict(
        json_encoders={Decimal: lambda v: float(v)},
    )

    id: UUID = Field(description="Unique bundle identifier")
    destination: str
    hotel: str
    excursion_type: ExcursionType
    departs_at: datetime
    returns_at: datetime
    duration_days: int
    price: Decimal
    capacity: int
    seats_left: int | None = Field(
        default=None,
        description="Free seats, when the booking count was looked up"
    )


class BundleListDTO(BaseModel):
    """Paginated list of bundles for API responses."""

    bundles: list[BundleDTO] = Field(default_factory=list)
    page: int = Field(default=1, ge=1, description="Current page number")
    page_size: int = Field(default=20, ge=1, le=100, description="Bundles per page")


class BookingDTO(BaseModel):
    """Booking confirmation returned after booking a bundle."""

    id: UUID
    bundle_id: UUID
    customer_id: UUID
    booked_at: datetime


class BookingPreviewDTO(BaseModel):
    """One row of a bundle's booking list, as shown to agents."""

    booking_id: UUID
    customer_id: UUID
    customer_name: str
    customer_email: str
    booked_at: datetime
