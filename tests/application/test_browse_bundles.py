"""Unit tests for bundle browsing use cases."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from app.travel_app.application.exceptions import BundleNotFoundError
from app.travel_app.application.use_cases.browse_bundles import (
    GetBundleUseCase,
    ListBundlesUseCase,
)
from app.travel_app.domain.entities.bundle import Bundle, ExcursionType
from app.travel_app.domain.value_objects import Name


@pytest.fixture
def sample_bundle() -> Bundle:
    departs_at = datetime(2025, 9, 10, tzinfo=timezone.utc)
    return Bundle(
        destination=Name("Crete"),
        hotel=Name("Minoan Palace"),
        excursion_type=ExcursionType.ROADTRIP,
        departs_at=departs_at,
        returns_at=departs_at + timedelta(days=4),
        price=Decimal("450.00"),
        capacity=3,
    )


class TestListBundlesUseCase:
    """Tests for ListBundlesUseCase."""

    @pytest.mark.asyncio
    async def test_execute_pages_and_filters(self, sample_bundle: Bundle) -> None:
        repository = AsyncMock()
        repository.list_bundles.return_value = [sample_bundle]
        use_case = ListBundlesUseCase(bundle_repository=repository)

        result = await use_case.execute(
            excursion_type=ExcursionType.ROADTRIP, page=3, page_size=10
        )

        repository.list_bundles.assert_awaited_once_with(
            excursion_type=ExcursionType.ROADTRIP, limit=10, offset=20
        )
        assert result.page == 3
        assert result.bundles[0].destination == "Crete"
        assert result.bundles[0].duration_days == 4
        assert result.bundles[0].seats_left is None


class TestGetBundleUseCase:
    """Tests for GetBundleUseCase."""

    @pytest.mark.asyncio
    async def test_execute_reports_seats_left(self, sample_bundle: Bundle) -> None:
        bundle_repository = AsyncMock()
        bundle_repository.get_by_id.return_value = sample_bundle
        booking_repository = AsyncMock()
        booking_repository.count_for_bundle.return_value = 1
        use_case = GetBundleUseCase(
            bundle_repository=bundle_repository,
            booking_repository=booking_repository,
        )

        result = await use_case.execute(sample_bundle.id)

        assert result.id == sample_bundle.id
        assert result.seats_left == 2

    @pytest.mark.asyncio
    async def test_execute_raises_not_found(self) -> None:
        bundle_repository = AsyncMock()
        bundle_repository.get_by_id.return_value = None
        use_case = GetBundleUseCase(
            bundle_repository=bundle_repository,
            booking_repository=AsyncMock(),
        )

        with pytest.raises(BundleNotFoundError):
            await use_case.execute(uuid4())
