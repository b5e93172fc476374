"""
Camp API Backend: Collection Service Unit Tests
================================================

What:  Fetch-all behavior with a mocked session (no real database).
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from camp_api.exceptions import DatabaseError
from camp_api.models import Camper
from camp_api.services.collection_service import CollectionService


class TestListAll:

    def setup_method(self):
        self.service = CollectionService()

    @pytest.mark.asyncio
    async def test_returns_every_row(self, mock_db_session):
        rows = [SimpleNamespace(id=i) for i in range(1, 4)]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = rows
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_all(mock_db_session, Camper)

        assert result == rows
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_empty_table(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        assert await self.service.list_all(mock_db_session, Camper) == []

    @pytest.mark.asyncio
    async def test_orders_by_primary_key_without_filters(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        await self.service.list_all(mock_db_session, Camper)

        sql = str(mock_db_session.execute.call_args.args[0])
        assert "FROM campers" in sql
        assert "ORDER BY campers.id" in sql
        assert "WHERE" not in sql
        assert "LIMIT" not in sql

    @pytest.mark.asyncio
    async def test_database_failure_is_wrapped(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("connection reset"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_all(mock_db_session, Camper)

        assert exc_info.value.context["table"] == "campers"
        assert "connection reset" not in exc_info.value.message
