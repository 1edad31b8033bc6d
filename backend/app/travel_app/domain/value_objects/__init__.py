"""Domain value objects for the travel app.

Every value object here can only exist in a validated state:
- Address: Street, number, city and region
- Name: Letters and spaces
- Email: RFC 5322 style address
- Phone: 3-3-4 digit phone number with optional country code
"""

from app.travel_app.domain.value_objects.address import Address
from app.travel_app.domain.value_objects.email import Email
from app.travel_app.domain.value_objects.name import Name
from app.travel_app.domain.value_objects.phone import Phone
from app.travel_app.domain.value_objects.validated_string import ValidatedString

__all__ = ["Address", "Email", "Name", "Phone", "ValidatedString"]
