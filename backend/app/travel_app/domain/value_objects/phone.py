"""Phone value object for North American style numbers."""

import re

from app.travel_app.domain.value_objects.validated_string import ValidatedString

# Optional "+CC", optional trunk "1", then 3-3-4 digits with optional
# parentheses around the area code and space, dot or dash separators.
_PHONE_PATTERN = re.compile(
    r"(\+\d{1,2}\s?)?1?-?\.?\s?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}",
    re.ASCII,
)


class Phone(ValidatedString):
    pattern = _PHONE_PATTERN

    @classmethod
    def describe_error(cls, raw: str) -> str:
        return (
            f"'{raw}' is not a valid phone. "
            "Expected 10 digits grouped 3-3-4, optionally with a country code."
        )
