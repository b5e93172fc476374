"""
Camp API Backend: Seed Command Tests
=====================================

What:  The sample loader fills an empty database once and never duplicates.
"""

import pytest
from sqlalchemy import event, func, select

from camp_api.database import async_session_factory, engine
from camp_api.models import Camper, Campsite
from camp_api.seed import SAMPLE_CAMPERS, seed_sample_data


async def count(model) -> int:
    async with async_session_factory() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar()


class TestSeedSampleData:

    @pytest.mark.asyncio
    async def test_seeds_empty_database(self, database):
        async with async_session_factory() as session:
            async with session.begin():
                inserted = await seed_sample_data(session)

        assert inserted == len(SAMPLE_CAMPERS) == 9
        assert await count(Camper) == 9
        assert await count(Campsite) == 3

    @pytest.mark.asyncio
    async def test_second_run_is_a_no_op(self, seeded_database):
        async with async_session_factory() as session:
            async with session.begin():
                inserted = await seed_sample_data(session)

        assert inserted == 0
        assert await count(Camper) == 9

    @pytest.mark.asyncio
    async def test_timestamps_are_populated(self, seeded_database):
        async with async_session_factory() as session:
            campers = (await session.execute(select(Camper))).scalars().all()

        assert all(c.created_at is not None for c in campers)
        assert all(c.updated_at is not None for c in campers)

    def test_every_camper_references_a_sample_campsite(self):
        from camp_api.seed import SAMPLE_CAMPSITES

        site_ids = {cid for cid, _ in SAMPLE_CAMPSITES}
        assert {site for _, _, site in SAMPLE_CAMPERS} <= site_ids
        assert [cid for cid, _, _ in SAMPLE_CAMPERS] == list(range(1, 10))


class TestSeedLeavesIdsToTheStore:

    @pytest.mark.asyncio
    async def test_inserts_carry_no_explicit_ids(self, database):
        statements = []

        def capture(conn, cursor, statement, parameters, context, executemany):
            if statement.lstrip().upper().startswith("INSERT"):
                statements.append(statement)

        event.listen(engine.sync_engine, "before_cursor_execute", capture)
        try:
            async with async_session_factory() as session:
                async with session.begin():
                    await seed_sample_data(session)
        finally:
            event.remove(engine.sync_engine, "before_cursor_execute", capture)

        assert statements
        for statement in statements:
            columns = statement.split("(", 1)[1].split(")", 1)[0]
            assert "id" not in [c.strip() for c in columns.split(",")]

    @pytest.mark.asyncio
    async def test_later_store_assigned_insert_does_not_collide(self, seeded_database):
        async with async_session_factory() as session:
            async with session.begin():
                camper = Camper(name="Latecomer", campsite_id=1)
                session.add(camper)

        assert camper.id == len(SAMPLE_CAMPERS) + 1
        assert await count(Camper) == 10

    @pytest.mark.asyncio
    async def test_existing_campsites_skip_the_seed(self, database):
        async with async_session_factory() as session:
            async with session.begin():
                session.add(Campsite(name="Hand-made"))

        async with async_session_factory() as session:
            async with session.begin():
                inserted = await seed_sample_data(session)

        assert inserted == 0
        assert await count(Campsite) == 1
        assert await count(Camper) == 0
