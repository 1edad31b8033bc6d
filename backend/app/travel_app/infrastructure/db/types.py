"""SQLAlchemy column types that persist domain values as plain columns.

Each type delegates to ``converters`` so ORM models can hold value objects
and enums directly. Writes only accept the domain type (never a raw
string), and reads re-validate the stored text.
"""

from datetime import datetime
from typing import Any, Callable
from uuid import UUID

from sqlalchemy import BigInteger, String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from app.travel_app.domain.entities.bundle import ExcursionType
from app.travel_app.domain.entities.customer import Gender
from app.travel_app.domain.value_objects import Address, Email, Name, Phone
from app.travel_app.infrastructure.db import converters


class _ConvertedType(TypeDecorator):
    """Shared bind/result plumbing for converter-backed column types."""

    cache_ok = True

    python_class: type
    to_column: Callable[[Any], Any]
    from_column: Callable[[Any], Any]

    @property
    def python_type(self) -> type:
        return self.python_class

    def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        if not isinstance(value, self.python_class):
            raise TypeError(
                f"{type(self).__name__} expects {self.python_class.__name__}, "
                f"got {type(value).__name__}"
            )
        return type(self).to_column(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        return type(self).from_column(value)


class AddressType(_ConvertedType):
    impl = String
    cache_ok = True
    python_class = Address
    to_column = converters.address_to_string
    from_column = converters.string_to_address


class NameType(_ConvertedType):
    impl = String
    cache_ok = True
    python_class = Name
    to_column = converters.name_to_string
    from_column = converters.string_to_name


class EmailType(_ConvertedType):
    impl = String
    cache_ok = True
    python_class = Email
    to_column = converters.email_to_string
    from_column = converters.string_to_email


class PhoneType(_ConvertedType):
    impl = String
    cache_ok = True
    python_class = Phone
    to_column = converters.phone_to_string
    from_column = converters.string_to_phone


class GenderType(_ConvertedType):
    impl = String
    cache_ok = True
    python_class = Gender
    to_column = converters.gender_to_string
    from_column = converters.string_to_gender


class ExcursionTypeType(_ConvertedType):
    impl = String
    cache_ok = True
    python_class = ExcursionType
    to_column = converters.excursion_type_to_string
    from_column = converters.string_to_excursion_type


class EpochMillis(_ConvertedType):
    """Timestamp stored as a 64-bit count of milliseconds since the epoch."""

    impl = BigInteger
    cache_ok = True
    python_class = datetime
    to_column = converters.datetime_to_epoch_millis
    from_column = converters.epoch_millis_to_datetime


class UUIDString(_ConvertedType):
    """UUID stored in its canonical 36-character hyphenated form."""

    impl = String
    cache_ok = True
    python_class = UUID
    to_column = converters.uuid_to_string
    from_column = converters.string_to_uuid
