#!/usr/bin/env python3
"""Seed the database with sample excursion bundles.

Run from backend directory:
    python scripts/seed_bundles.py

This script is idempotent - safe to run multiple times. Bundle ids are
derived from the destination and departure date, so a rerun updates the
seeded rows instead of adding copies.
"""

import asyncio
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import NAMESPACE_URL, UUID, uuid5

sys.path.insert(0, ".")

from app.travel_app.domain.entities.bundle import Bundle, ExcursionType
from app.travel_app.domain.repositories.bundle_repository import BundleRepository
from app.travel_app.domain.value_objects import Name
from app.travel_app.infrastructure.db.session import create_schema, get_async_session_local
from app.travel_app.infrastructure.repositories.sql_bundle_repository import (
    SqlBundleRepository,
)

BUNDLES = [
    {
        "destination": "Santorini",
        "hotel": "Blue Dome",
        "excursion_type": ExcursionType.CRUISE,
        "departs_at": datetime(2026, 6, 1, 9, 0, tzinfo=timezone.utc),
        "nights": 7,
        "price": Decimal("1200.00"),
        "capacity": 20,
    },
    {
        "destination": "Dalmatian Coast",
        "hotel": "Adriatic Pearl",
        "excursion_type": ExcursionType.CRUISE,
        "departs_at": datetime(2026, 7, 12, 8, 0, tzinfo=timezone.utc),
        "nights": 10,
        "price": Decimal("1850.00"),
        "capacity": 30,
    },
    {
        "destination": "Route Sixty Six",
        "hotel": "Desert Motel",
        "excursion_type": ExcursionType.ROADTRIP,
        "departs_at": datetime(2026, 8, 3, 7, 30, tzinfo=timezone.utc),
        "nights": 14,
        "price": Decimal("2400.00"),
        "capacity": 8,
    },
    {
        "destination": "Kyoto",
        "hotel": "Garden Ryokan",
        "excursion_type": ExcursionType.INDEPENDENT,
        "departs_at": datetime(2026, 10, 5, 10, 0, tzinfo=timezone.utc),
        "nights": 5,
        "price": Decimal("950.00"),
        "capacity": 12,
    },
]


def seed_bundle_id(destination: str, departs_at: datetime) -> UUID:
    """Stable id for a seeded bundle."""
    return uuid5(NAMESPACE_URL, f"travel-app/bundles/{destination}/{departs_at.isoformat()}")


def build_bundle(bundle_data: dict) -> Bundle:
    """Build a Bundle entity from one seed entry."""
    departs_at = bundle_data["departs_at"]
    return Bundle(
        id=seed_bundle_id(bundle_data["destination"], departs_at),
        destination=Name(bundle_data["destination"]),
        hotel=Name(bundle_data["hotel"]),
        excursion_type=bundle_data["excursion_type"],
        departs_at=departs_at,
        returns_at=departs_at + timedelta(days=bundle_data["nights"]),
        price=bundle_data["price"],
        capacity=bundle_data["capacity"],
    )


async def seed_bundles(repository: BundleRepository) -> int:
    """Seed bundles, updating existing ones. Returns count of new bundles."""
    created = 0
    for bundle_data in BUNDLES:
        bundle = build_bundle(bundle_data)
        existing = await repository.get_by_id(bundle.id)

        await repository.save(bundle)
        if existing:
            print(f"  ⏭️  Bundle {bundle.destination} already exists (id={bundle.id}), refreshed")
            continue

        created += 1
        print(f"  ✅ Created bundle: {bundle.destination} ({bundle.excursion_type.value})")

    return created


async def seed():
    """Run all seed operations."""
    print("\n" + "=" * 50)
    print("Travel App - Database Seeding")
    print("=" * 50)

    await create_schema()

    session_factory = get_async_session_local()
    async with session_factory() as session:
        repository = SqlBundleRepository(session)

        print("\n🧳 Seeding Bundles...")
        bundles_created = await seed_bundles(repository)

        await session.commit()

        print("\n" + "-" * 50)
        print("✅ Seeding complete!")
        print(f"   Bundles created: {bundles_created}")
        print("=" * 50 + "\n")

        bundles = await repository.list_bundles(limit=100)
        print(f"📊 Total bundles in database: {len(bundles)}")


if __name__ == "__main__":
    asyncio.run(seed())
