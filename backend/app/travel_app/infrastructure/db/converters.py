"""Conversions between domain values and their stored column form.

Encoding is total: every validated value and enum member has exactly one
canonical text token. Decoding re-validates what was stored and raises
``CorruptDatabaseObjectException`` when it no longer passes, rather than
substituting a default.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import TypeVar
from uuid import UUID

from app.travel_app.domain.entities.bundle import ExcursionType
from app.travel_app.domain.entities.customer import Gender
from app.travel_app.domain.validation import Invalid, fold_validation_errors
from app.travel_app.domain.value_objects import Address, Email, Name, Phone
from app.travel_app.domain.value_objects.validated_string import ValidatedString
from app.travel_app.infrastructure.db.exceptions import CorruptDatabaseObjectException

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=ValidatedString)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)

_GENDER_BY_TOKEN = {"male": Gender.MALE, "female": Gender.FEMALE}
_EXCURSION_TYPE_BY_TOKEN = {
    "cruise": ExcursionType.CRUISE,
    "roadtrip": ExcursionType.ROADTRIP,
    "independent": ExcursionType.INDEPENDENT,
}


def encode_validated(value: ValidatedString) -> str:
    """Return the canonical stored string of a validated value."""
    return str(value)


def decode_validated(value_type: type[V], stored: str) -> V:
    """Rebuild a validated value from its stored string.

    Args:
        value_type: The value object class to rebuild.
        stored: The string read from the database.

    Returns:
        The validated value.

    Raises:
        CorruptDatabaseObjectException: If ``stored`` fails validation.
    """
    result = value_type.try_create(stored)
    if isinstance(result, Invalid):
        message = fold_validation_errors(result.errors)
        logger.error("Corrupt %s read from database: %s", value_type.__name__, message)
        raise CorruptDatabaseObjectException(message)
    return result.value


def address_to_string(value: Address) -> str:
    return encode_validated(value)


def string_to_address(value: str) -> Address:
    return decode_validated(Address, value)


def name_to_string(value: Name) -> str:
    return encode_validated(value)


def string_to_name(value: str) -> Name:
    return decode_validated(Name, value)


def email_to_string(value: Email) -> str:
    return encode_validated(value)


def string_to_email(value: str) -> Email:
    return decode_validated(Email, value)


def phone_to_string(value: Phone) -> str:
    return encode_validated(value)


def string_to_phone(value: str) -> Phone:
    return decode_validated(Phone, value)


def gender_to_string(value: Gender) -> str:
    return value.value


def string_to_gender(value: str) -> Gender:
    try:
        return _GENDER_BY_TOKEN[value]
    except KeyError:
        logger.error("Corrupt Gender read from database: %r", value)
        raise CorruptDatabaseObjectException(f"Gender was {value}") from None


def excursion_type_to_string(value: ExcursionType) -> str:
    return value.value


def string_to_excursion_type(value: str) -> ExcursionType:
    try:
        return _EXCURSION_TYPE_BY_TOKEN[value]
    except KeyError:
        logger.error("Corrupt ExcursionType read from database: %r", value)
        raise CorruptDatabaseObjectException(f"ExcursionType was {value}") from None


def datetime_to_epoch_millis(value: datetime) -> int:
    """Convert a timestamp to milliseconds since the Unix epoch.

    Naive datetimes are taken to be UTC. Sub-millisecond precision is dropped.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH) // _ONE_MILLISECOND


def epoch_millis_to_datetime(value: int) -> datetime:
    """Convert milliseconds since the Unix epoch to an aware UTC datetime."""
    return _EPOCH + timedelta(milliseconds=value)


def uuid_to_string(value: UUID) -> str:
    return str(value)


def string_to_uuid(value: str) -> UUID:
    return UUID(value)
