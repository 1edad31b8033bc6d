"""Name value object for people, hotels and destinations."""

import re

from app.travel_app.domain.value_objects.validated_string import ValidatedString

# Letters and spaces only. Capitalization is mentioned in the error message
# but is not enforced by the pattern.
_NAME_PATTERN = re.compile(r"[A-Za-z ]+")


class Name(ValidatedString):
    """A human-readable name made of ASCII letters and spaces."""

    pattern = _NAME_PATTERN

    @classmethod
    def describe_error(cls, raw: str) -> str:
        return (
            f"'{raw}' was invalid. Words should start with a capital letter. "
            "Only letters and spaces are allowed."
        )
