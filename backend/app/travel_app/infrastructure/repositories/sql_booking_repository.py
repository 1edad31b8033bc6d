"""SQLAlchemy implementation of BookingRepository."""

from typing import List
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.travel_app.domain.entities.booking import Booking
from app.travel_app.domain.repositories.booking_repository import BookingRepository
from app.travel_app.infrastructure.db.models import BookingModel


class SqlBookingRepository(BookingRepository):
    """SQLAlchemy-based implementation of the BookingRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def count_for_bundle(self, bundle_id: UUID) -> int:
        """Count bookings already made for a bundle."""
        stmt = select(func.count(BookingModel.id)).where(
            BookingModel.bundle_id == bundle_id
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def get_for_bundle(self, bundle_id: UUID) -> List[Booking]:
        """Retrieve all bookings of a bundle, oldest first."""
        stmt = (
            select(BookingModel)
            .where(BookingModel.bundle_id == bundle_id)
            .order_by(BookingModel.booked_at)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def save(self, booking: Booking) -> Booking:
        """Persist a new booking."""
        model = BookingModel(
            id=booking.id,
            bundle_id=booking.bundle_id,
            customer_id=booking.customer_id,
            booked_at=booking.booked_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    def _to_entity(self, model: BookingModel) -> Booking:
        """Convert a BookingModel to a Booking domain entity."""
        return Booking(
            id=model.id,
            bundle_id=model.bundle_id,
            customer_id=model.customer_id,
            booked_at=model.booked_at,
        )
