"""Database infrastructure components.

This module exports SQLAlchemy models, the converter-backed column types,
session management utilities and the corruption error raised on bad reads.
"""

from app.travel_app.infrastructure.db.exceptions import CorruptDatabaseObjectException
from app.travel_app.infrastructure.db.models import (
    Base,
    BookingModel,
    BundleModel,
    CustomerModel,
)
from app.travel_app.infrastructure.db.session import (
    create_schema,
    get_async_session_local,
    get_db_session,
    get_engine,
)

__all__ = [
    "CorruptDatabaseObjectException",
    # Base class
    "Base",
    # Models
    "CustomerModel",
    "BundleModel",
    "BookingModel",
    # Session utilities
    "create_schema",
    "get_engine",
    "get_async_session_local",
    "get_db_session",
]
