"""
Seed script -- populates the database with sample schools for reviewers.

Run with:
    python seed.py

Creates the ``schools`` table if it does not exist, then inserts a few
schools around central Mumbai unless the table already has rows.
"""

import asyncio

from src.config import settings
from src.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from src.infrastructure.repositories import SchoolRepository


SCHOOLS = [
    {"name": "Cathedral & John Connon School", "address": "6 Purshottamdas Thakurdas Marg, Fort", "latitude": 18.9322, "longitude": 72.8302},
    {"name": "Bombay Scottish School", "address": "Veer Savarkar Marg, Mahim", "latitude": 19.0402, "longitude": 72.8397},
    {"name": "Campion School", "address": "13 Cooperage Road, Fort", "latitude": 18.9255, "longitude": 72.8307},
    {"name": "Jamnabai Narsee School", "address": "Narsee Monjee Bhavan, Juhu", "latitude": 19.1075, "longitude": 72.8366},
    {"name": "Hiranandani Foundation School", "address": "Hiranandani Gardens, Powai", "latitude": 19.1176, "longitude": 72.9060},
    {"name": "Don Bosco High School", "address": "Don Bosco Road, Matunga", "latitude": 19.0269, "longitude": 72.8553},
    {"name": "St. Xavier's High School", "address": "Lokmanya Tilak Marg, Dhobi Talao", "latitude": 18.9430, "longitude": 72.8315},
    {"name": "Podar International School", "address": "Ramee Park, Santacruz West", "latitude": 19.0811, "longitude": 72.8370},
]


async def seed(session_factory):
    async with session_factory() as session:
        repo = SchoolRepository(session)
        if await repo.count() > 0:
            print("Database already seeded. Skipping.")
            return

        for s in SCHOOLS:
            await repo.create_school(**s)
        await session.commit()
        print(f"  Created {len(SCHOOLS)} schools")


async def main():
    print("Seeding database...")
    engine = build_engine(settings)
    try:
        await create_schema(engine)
        await seed(build_session_factory(engine))
        print("\nSeed complete!")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
