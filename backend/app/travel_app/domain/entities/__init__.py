"""Domain entities for the travel app."""

from app.travel_app.domain.entities.booking import Booking
from app.travel_app.domain.entities.bundle import Bundle, ExcursionType
from app.travel_app.domain.entities.customer import Customer, Gender

__all__ = ["Booking", "Bundle", "Customer", "ExcursionType", "Gender"]
