"""Application use cases for orchestrating domain logic."""

from app.travel_app.application.use_cases.book_bundle import (
    BookBundleUseCase,
    GetBundleBookingsUseCase,
)
from app.travel_app.application.use_cases.browse_bundles import (
    GetBundleUseCase,
    ListBundlesUseCase,
)
from app.travel_app.application.use_cases.register_customer import (
    GetCustomerUseCase,
    RegisterCustomerUseCase,
)

__all__ = [
    "RegisterCustomerUseCase",
    "GetCustomerUseCase",
    "ListBundlesUseCase",
    "GetBundleUseCase",
    "BookBundleUseCase",
    "GetBundleBookingsUseCase",
]
