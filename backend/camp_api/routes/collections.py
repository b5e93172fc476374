"""
Camp API Backend: Versioned Collection Routes
==============================================

What:  Builds one APIRouter per API version from the registry.
How:   For each Resource registered under a version, mounts
       GET /api/<version>/<collection> → fetch-all → serializer.dump.
Who:   Called by create_app() while assembling the application.

Route shape:
    GET /api/v1/campers
    200 application/json
    {"campers": [{"id": 1, "name": "Rovaira", "campsite_id": 1}, ...]}

Only GET is mounted. Other verbs on a collection path get FastAPI's 405,
unknown collections its 404.
"""

import logging
from typing import Any, Callable, Coroutine, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from camp_api.database import get_db_session
from camp_api.registry import ApiRegistry, Resource
from camp_api.schemas.common import ErrorResponse
from camp_api.services.collection_service import collection_service

logger = logging.getLogger(__name__)


def _make_list_endpoint(
    resource: Resource,
) -> Callable[..., Coroutine[Any, Any, Dict[str, Any]]]:
    """Bind a list handler to one registered resource."""

    async def list_collection(
        db: AsyncSession = Depends(get_db_session),
    ) -> Dict[str, Any]:
        records = await collection_service.list_all(db, resource.model)
        return resource.serializer.dump(records)

    list_collection.__name__ = f"list_{resource.version}_{resource.collection}"
    return list_collection


def build_version_router(version: str, registry: ApiRegistry) -> APIRouter:
    """
    Create the router for one API generation.

    Args:
        version:   Path segment, e.g. "v1"
        registry:  Registration table; only resources under `version` are mounted

    Returns:
        APIRouter prefixed with /api/<version>
    """
    router = APIRouter(prefix=f"/api/{version}", tags=[f"API {version}"])

    for resource in registry.resources(version):
        fields = ", ".join(resource.serializer.fields)
        router.add_api_route(
            f"/{resource.collection}",
            _make_list_endpoint(resource),
            methods=["GET"],
            response_model=resource.serializer.collection_model,
            responses={
                500: {"description": "Server error", "model": ErrorResponse},
            },
            name=f"{version}:list_{resource.collection}",
            summary=f"List all {resource.collection}",
            description=(
                f"Returns every {resource.model.__name__} record under the "
                f"'{resource.serializer.root}' key. Each item carries exactly: {fields}."
            ),
        )
        logger.debug("Mounted GET %s", resource.path)

    return router
