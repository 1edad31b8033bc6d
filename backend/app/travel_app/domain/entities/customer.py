"""Customer entity representing a traveller registered with the agency."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from app.travel_app.domain.entities.clock import utc_now
from app.travel_app.domain.value_objects import Address, Email, Name, Phone


class Gender(Enum):
    """Customer gender; values are the storage tokens."""

    MALE = "male"
    FEMALE = "female"


@dataclass
class Customer:
    """Domain entity representing a registered customer.

    Attributes:
        first_name: Validated given name.
        last_name: Validated family name.
        email: Validated contact email.
        phone: Validated contact phone.
        address: Validated home address.
        gender: Customer gender.
        id: Unique identifier, generated for new customers.
        registered_at: Timestamp when the customer registered, millisecond precision.
    """

    first_name: Name
    last_name: Name
    email: Email
    phone: Phone
    address: Address
    gender: Gender
    id: UUID = field(default_factory=uuid4)
    registered_at: datetime = field(default_factory=utc_now)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
