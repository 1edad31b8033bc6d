"""SQLAlchemy implementation of BundleRepository."""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.travel_app.domain.entities.bundle import Bundle, ExcursionType
from app.travel_app.domain.repositories.bundle_repository import BundleRepository
from app.travel_app.infrastructure.db.models import BundleModel


class SqlBundleRepository(BundleRepository):
    """SQLAlchemy-based implementation of the BundleRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with a database session.

        Args:
            session: An async SQLAlchemy session.
        """
        self._session = session

    async def get_by_id(self, bundle_id: UUID) -> Optional[Bundle]:
        """Retrieve a bundle by identifier."""
        model = await self._session.get(BundleModel, bundle_id)
        return self._to_entity(model) if model else None

    async def get_by_id_for_update(self, bundle_id: UUID) -> Optional[Bundle]:
        """Retrieve a bundle holding a row lock until commit or rollback."""
        stmt = select(BundleModel).where(BundleModel.id == bundle_id).with_for_update()
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_bundles(
        self,
        excursion_type: Optional[ExcursionType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Bundle]:
        """List bundles ordered by departure, optionally filtered by type."""
        stmt = select(BundleModel)
        if excursion_type is not None:
            stmt = stmt.where(BundleModel.excursion_type == excursion_type)
        stmt = stmt.order_by(BundleModel.departs_at).limit(limit).offset(offset)

        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def save(self, bundle: Bundle) -> Bundle:
        """Persist a bundle entity, inserting or updating by id."""
        model = await self._session.get(BundleModel, bundle.id)
        if model is None:
            model = self._to_model(bundle)
            self._session.add(model)
        else:
            model.destination = bundle.destination
            model.hotel = bundle.hotel
            model.excursion_type = bundle.excursion_type
            model.departs_at = bundle.departs_at
            model.returns_at = bundle.returns_at
            model.price = bundle.price
            model.capacity = bundle.capacity

        await self._session.flush()
        return self._to_entity(model)

    def _to_entity(self, model: BundleModel) -> Bundle:
        """Convert a BundleModel to a Bundle domain entity."""
        return Bundle(
            id=model.id,
            destination=model.destination,
            hotel=model.hotel,
            excursion_type=model.excursion_type,
            departs_at=model.departs_at,
            returns_at=model.returns_at,
            price=Decimal(str(model.price)),
            capacity=model.capacity,
        )

    def _to_model(self, entity: Bundle) -> BundleModel:
        """Convert a Bundle domain entity to a BundleModel."""
        return BundleModel(
            id=entity.id,
            destination=entity.destination,
            hotel=entity.hotel,
            excursion_type=entity.excursion_type,
            departs_at=entity.departs_at,
            returns_at=entity.returns_at,
            price=entity.price,
            capacity=entity.capacity,
        )
