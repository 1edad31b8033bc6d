"""Address value object: "Street 123, City, Region"."""

import re

from app.travel_app.domain.value_objects.validated_string import ValidatedString

_ADDRESS_PATTERN = re.compile(r"[A-Z][a-z]+ [0-9]+, [A-Z][a-z]+, [A-Z][a-z]+")


class Address(ValidatedString):
    """Postal address of the form ``Main 123, Springfield, Illinois``.

    Each of the three words must start with a capital letter followed by
    lowercase letters, and the street name is followed by its number.
    """

    pattern = _ADDRESS_PATTERN

    @classmethod
    def describe_error(cls, raw: str) -> str:
        return (
            f"'{raw}' is not a valid address. "
            "Expected 'Street 123, City, Region' with capitalized words."
        )
