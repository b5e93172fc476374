"""ORM constraints the API relies on but does not enforce itself."""

import pytest
from sqlalchemy.exc import IntegrityError

from camp_api.database import async_session_factory
from camp_api.models import Camper, Campsite


class TestCamperConstraints:

    @pytest.mark.asyncio
    async def test_campsite_must_exist(self, database):
        with pytest.raises(IntegrityError):
            async with async_session_factory() as session:
                async with session.begin():
                    session.add(Camper(name="Orphan", campsite_id=42))

    @pytest.mark.asyncio
    async def test_store_assigns_id_and_timestamps(self, database):
        async with async_session_factory() as session:
            async with session.begin():
                site = Campsite(name="Pine Hollow")
                session.add(site)
                await session.flush()
                camper = Camper(name="Rovaira", campsite_id=site.id)
                session.add(camper)
                await session.flush()

        assert camper.id is not None
        assert camper.created_at is not None
        assert camper.updated_at is not None
