"""Email value object validated against an RFC 5322 style pattern."""

import re

from app.travel_app.domain.value_objects.validated_string import ValidatedString

# Local part (dot-atom or quoted string) @ domain (dotted labels or a
# bracketed IPv4 / tagged literal). Lowercase only.
_EMAIL_PATTERN = re.compile(
    r"(?:[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r'|"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]'
    r'|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*")'
    r"@(?:(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"
    r"|\[(?:(?:(2(5[0-5]|[0-4][0-9])|1[0-9][0-9]|[1-9]?[0-9]))\.){3}"
    r"(?:(2(5[0-5]|[0-4][0-9])|1[0-9][0-9]|[1-9]?[0-9])"
    r"|[a-z0-9-]*[a-z0-9]:(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]"
    r"|\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)\])"
)


class Email(ValidatedString):
    """Immutable value object representing a validated email address."""

    pattern = _EMAIL_PATTERN

    @classmethod
    def describe_error(cls, raw: str) -> str:
        return f"'{raw}' is not a valid email address. Expected 'local-part@domain'."
