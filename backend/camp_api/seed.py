"""
Sample data loader for local development and demos.

Usage:
    python -m camp_api.seed            # create tables, load sample rows if empty
    python -m camp_api.seed --reset    # drop tables first, then load

Reads DATABASE_URL like the server does.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from camp_api.config import settings
from camp_api.database import (
    async_session_factory,
    create_tables,
    dispose_engine,
    drop_tables,
)
from camp_api.models import Camper, Campsite

logger = logging.getLogger(__name__)

# (expected id on an empty database, name). Ids are assigned by the store.
SAMPLE_CAMPSITES: List[Tuple[int, str]] = [
    (1, "Pine Hollow"),
    (2, "Lakeside Meadow"),
    (3, "Granite Ridge"),
]

# (expected id, name, expected campsite id)
SAMPLE_CAMPERS: List[Tuple[int, str, int]] = [
    (1, "Rovaira", 1),
    (2, "Tamsin", 1),
    (3, "Oduya", 1),
    (4, "Brannick", 2),
    (5, "Lisbet", 2),
    (6, "Kaelen", 2),
    (7, "Marisol", 3),
    (8, "Dagny", 3),
    (9, "Ezekiel", 3),
]


async def _count(session: AsyncSession, model) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar() or 0


async def seed_sample_data(session: AsyncSession) -> int:
    """
    Insert the sample campsites and campers into an empty database.

    Primary keys are left to the store so PostgreSQL sequences stay in step
    with the table; rows are inserted in list order, which yields the
    expected ids on empty tables.

    Returns:
        Number of campers inserted; 0 when either table already has rows.
    """
    campsites = await _count(session, Campsite)
    campers = await _count(session, Camper)
    if campsites or campers:
        logger.info(
            "Database already holds %d campsites and %d campers; skipping seed",
            campsites, campers,
        )
        return 0

    sites = {key: Campsite(name=name) for key, name in SAMPLE_CAMPSITES}
    session.add_all(sites.values())
    # Parents need their store-assigned ids before the FK-checked camper inserts
    await session.flush()
    session.add_all(
        Camper(name=name, campsite_id=sites[site].id) for _, name, site in SAMPLE_CAMPERS
    )
    await session.flush()
    return len(SAMPLE_CAMPERS)


async def run(reset: bool = False) -> int:
    if reset:
        logger.info("Dropping existing tables")
        await drop_tables()
    await create_tables()

    try:
        async with async_session_factory() as session:
            async with session.begin():
                inserted = await seed_sample_data(session)
    finally:
        await dispose_engine()

    logger.info("Seed complete: %d campers inserted", inserted)
    return inserted


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Load sample campers and campsites.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop all tables before seeding (destroys existing data)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    asyncio.run(run(reset=args.reset))
    return 0


if __name__ == "__main__":
    sys.exit(main())
