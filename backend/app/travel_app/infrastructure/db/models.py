"""SQLAlchemy ORM models mapping to domain entities.

Validated values, enums, timestamps and identifiers are stored through the
column types in ``types``: text tokens for value objects and enums, epoch
milliseconds for timestamps and 36-character strings for UUIDs.
"""

from uuid import uuid4

from sqlalchemy import Column, ForeignKey, Index, Integer, Numeric
from sqlalchemy.orm import DeclarativeBase, relationship

from app.travel_app.infrastructure.db.types import (
    AddressType,
    EmailType,
    EpochMillis,
    ExcursionTypeType,
    GenderType,
    NameType,
    PhoneType,
    UUIDString,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class CustomerModel(Base):
    """ORM model for customers table."""

    __tablename__ = "customers"

    id = Column(UUIDString(36), primary_key=True, default=uuid4)
    first_name = Column(NameType(100), nullable=False)
    last_name = Column(NameType(100), nullable=False)
    email = Column(EmailType(255), unique=True, nullable=False, index=True)
    phone = Column(PhoneType(32), nullable=False)
    address = Column(AddressType(255), nullable=False)
    gender = Column(GenderType(16), nullable=False)
    registered_at = Column(EpochMillis, nullable=False)

    # Relationships
    bookings = relationship(
        "BookingModel", back_populates="customer", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<CustomerModel(id={self.id}, email='{self.email}')>"


class BundleModel(Base):
    """ORM model for bundles table."""

    __tablename__ = "bundles"

    id = Column(UUIDString(36), primary_key=True, default=uuid4)
    destination = Column(NameType(100), nullable=False, index=True)
    hotel = Column(NameType(100), nullable=False)
    excursion_type = Column(ExcursionTypeType(16), nullable=False, index=True)
    departs_at = Column(EpochMillis, nullable=False, index=True)
    returns_at = Column(EpochMillis, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    capacity = Column(Integer, nullable=False, default=1)

    # Relationships
    bookings = relationship(
        "BookingModel", back_populates="bundle", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<BundleModel(id={self.id}, destination='{self.destination}')>"


class BookingModel(Base):
    """ORM model for bookings table."""

    __tablename__ = "bookings"

    id = Column(UUIDString(36), primary_key=True, default=uuid4)
    bundle_id = Column(UUIDString(36), ForeignKey("bundles.id"), nullable=False, index=True)
    customer_id = Column(
        UUIDString(36), ForeignKey("customers.id"), nullable=False, index=True
    )
    booked_at = Column(EpochMillis, nullable=False)

    # Relationships
    bundle = relationship("BundleModel", back_populates="bookings")
    customer = relationship("CustomerModel", back_populates="bookings")

    __table_args__ = (
        Index("ix_bookings_bundle_customer", "bundle_id", "customer_id", unique=True),
    )

    def __repr__(self) -> str:
        return f"<BookingModel(id={self.id}, bundle_id={self.bundle_id})>"
