"""Tests for the converter-backed SQLAlchemy column types.

Uses an in-memory SQLite database through the synchronous engine; the
column types behave the same under the async PostgreSQL driver.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy import create_engine, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.travel_app.domain.entities import ExcursionType, Gender
from app.travel_app.domain.value_objects import Address, Email, Name, Phone
from app.travel_app.infrastructure.db.exceptions import CorruptDatabaseObjectException
from app.travel_app.infrastructure.db.models import (
    Base,
    BookingModel,
    BundleModel,
    CustomerModel,
)
from app.travel_app.infrastructure.db.types import AddressType, GenderType, UUIDString

REGISTERED_AT = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def engine() -> Engine:
    """Create an in-memory database with all tables."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def customer_model() -> CustomerModel:
    """Create a customer row built from validated values."""
    return CustomerModel(
        id=uuid4(),
        first_name=Name("John"),
        last_name=Name("Smith"),
        email=Email("john@example.com"),
        phone=Phone("555-123-4567"),
        address=Address("Main 123, Springfield, Illinois"),
        gender=Gender.MALE,
        registered_at=REGISTERED_AT,
    )


class TestColumnRoundTrip:
    """Tests for writing and reading domain values through the ORM."""

    def test_customer_round_trip(self, engine: Engine, customer_model: CustomerModel) -> None:
        customer_id = customer_model.id
        with Session(engine) as session:
            session.add(customer_model)
            session.commit()

        with Session(engine) as session:
            loaded = session.get(CustomerModel, customer_id)

            assert loaded is not None
            assert loaded.id == customer_id
            assert loaded.first_name == Name("John")
            assert loaded.email == Email("john@example.com")
            assert loaded.address == Address("Main 123, Springfield, Illinois")
            assert loaded.gender is Gender.MALE
            assert loaded.registered_at == REGISTERED_AT

    def test_columns_hold_plain_tokens(self, engine: Engine, customer_model: CustomerModel) -> None:
        """Test the stored form is plain text, bigint millis and a UUID string."""
        customer_id = customer_model.id
        with Session(engine) as session:
            session.add(customer_model)
            session.commit()

        with engine.connect() as connection:
            row = connection.execute(
                text("SELECT id, address, gender, registered_at FROM customers")
            ).one()

        assert row.id == str(customer_id)
        assert row.address == "Main 123, Springfield, Illinois"
        assert row.gender == "male"
        assert row.registered_at == 1_735_787_045_000

    def test_bundle_and_booking_round_trip(
        self, engine: Engine, customer_model: CustomerModel
    ) -> None:
        bundle_id = uuid4()
        customer_id = customer_model.id
        departs_at = datetime(2025, 6, 1, tzinfo=timezone.utc)
        with Session(engine) as session:
            session.add(customer_model)
            session.add(
                BundleModel(
                    id=bundle_id,
                    destination=Name("Santorini"),
                    hotel=Name("Blue Dome"),
                    excursion_type=ExcursionType.ROADTRIP,
                    departs_at=departs_at,
                    returns_at=departs_at + timedelta(days=5),
                    price=Decimal("899.00"),
                    capacity=10,
                )
            )
            session.add(
                BookingModel(
                    bundle_id=bundle_id,
                    customer_id=customer_id,
                    booked_at=REGISTERED_AT,
                )
            )
            session.commit()

        with Session(engine) as session:
            bundle = session.get(BundleModel, bundle_id)
            bookings = session.execute(
                select(BookingModel).where(BookingModel.bundle_id == bundle_id)
            ).scalars().all()

            assert bundle is not None
            assert bundle.excursion_type is ExcursionType.ROADTRIP
            assert bundle.departs_at == departs_at
            assert len(bookings) == 1
            assert bookings[0].customer_id == customer_id

    def test_query_by_value_object(self, engine: Engine, customer_model: CustomerModel) -> None:
        customer_id = customer_model.id
        with Session(engine) as session:
            session.add(customer_model)
            session.commit()

        with Session(engine) as session:
            found = session.execute(
                select(CustomerModel).where(CustomerModel.email == Email("john@example.com"))
            ).scalar_one_or_none()

            assert found is not None
            assert found.id == customer_id


class TestCorruptRows:
    """Tests for reading rows that no longer validate."""

    def _insert_raw_customer(self, engine: Engine, address: str, gender: str) -> None:
        with engine.begin() as connection:
            connection.execute(
                text(
                    "INSERT INTO customers "
                    "(id, first_name, last_name, email, phone, address, gender, registered_at) "
                    "VALUES (:id, 'John', 'Smith', 'john@example.com', '555-123-4567', "
                    ":address, :gender, 0)"
                ),
                {"id": str(uuid4()), "address": address, "gender": gender},
            )

    def test_tampered_address_fails_the_read(self, engine: Engine) -> None:
        self._insert_raw_customer(engine, address="main street", gender="male")

        with Session(engine) as session:
            with pytest.raises(CorruptDatabaseObjectException, match="main street"):
                session.execute(select(CustomerModel)).scalars().all()

    def test_unknown_gender_token_fails_the_read(self, engine: Engine) -> None:
        self._insert_raw_customer(
            engine, address="Main 123, Springfield, Illinois", gender="unknown"
        )

        with Session(engine) as session:
            with pytest.raises(CorruptDatabaseObjectException, match="Gender was unknown"):
                session.execute(select(CustomerModel)).scalars().all()


class TestBindParameters:
    """Tests for the write side of the column types."""

    def test_raw_string_is_rejected(self) -> None:
        """Test an unvalidated string cannot be written to a validated column."""
        with pytest.raises(TypeError, match="expects Address"):
            AddressType().process_bind_param("Main 123, Springfield, Illinois", dialect=None)

    def test_none_passes_through(self) -> None:
        assert GenderType().process_bind_param(None, dialect=None) is None
        assert GenderType().process_result_value(None, dialect=None) is None

    def test_python_type(self) -> None:
        assert AddressType().python_type is Address
        assert UUIDString(36).python_type.__name__ == "UUID"
