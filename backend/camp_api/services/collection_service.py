"""
Camp API Backend: Collection Service
=====================================

What:  Reads the full, unfiltered collection of one entity type.
Who:   Called by every route built from the registry.
When:  Once per GET /api/<version>/<collection> request.

Query plan:
    SELECT * FROM <table> ORDER BY <primary key>

    No filtering, no pagination, no caller-controlled sorting. Ordering by
    primary key makes repeated reads of an unchanged table byte-identical.

CollectionService is stateless; the session is passed per call.
"""

import logging
from typing import List, Type

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from camp_api.database import Base
from camp_api.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class CollectionService:
    """Read-only access to whole collections."""

    async def list_all(self, db: AsyncSession, model: Type[Base]) -> List[Base]:
        """
        Return every record of `model`, ordered by primary key.

        Args:
            db:     Async database session (injected by FastAPI)
            model:  ORM class registered for the collection

        Returns:
            List of ORM instances; empty when the table is empty.

        Raises:
            DatabaseError: the query failed (→ 500, details logged only)
        """
        query = select(model).order_by(*model.__table__.primary_key.columns)

        try:
            result = await db.execute(query)
            records = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(
                "Database error listing %s: %s",
                model.__tablename__, str(e), exc_info=True,
            )
            raise DatabaseError(
                message="Could not retrieve the collection. Please try again.",
                context={"table": model.__tablename__, "error_type": type(e).__name__},
            ) from e

        logger.debug("Fetched %d rows from %s", len(records), model.__tablename__)
        return records


# Stateless singleton
collection_service = CollectionService()
