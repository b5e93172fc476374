"""
Camp API Backend: Resource Registry
====================================

What:  The explicit table of everything the API exposes.
How:   Each registration binds (version, collection) to an ORM model and the
       Serializer that shapes it. The router reads this table at startup and
       mounts one GET route per entry; nothing is inferred from class names.

    ┌─────────┬─────────────┬──────────┬──────────────────────┐
    │ version │ collection  │ model    │ serializer           │
    ├─────────┼─────────────┼──────────┼──────────────────────┤
    │ v1      │ campers     │ Camper   │ camper_serializer    │
    │ v1      │ campsites   │ Campsite │ campsite_serializer  │
    └─────────┴─────────────┴──────────┴──────────────────────┘

A new API generation is a new block of rows: registering ("v2", "campers")
with a different serializer leaves the v1 route untouched.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterator, Tuple, Type

from camp_api.database import Base
from camp_api.exceptions import NotFoundError, RegistryError
from camp_api.models import Camper, Campsite
from camp_api.serializers import Serializer, camper_serializer, campsite_serializer

logger = logging.getLogger(__name__)

# Versions and collections become single URL path segments
_SEGMENT = re.compile(r"^[a-z0-9_-]+$")


@dataclass(frozen=True)
class Resource:
    """One registered collection endpoint."""

    version: str
    collection: str
    model: Type[Base]
    serializer: Serializer

    @property
    def path(self) -> str:
        return f"/api/{self.version}/{self.collection}"


class ApiRegistry:
    """
    Mapping of (version, collection) → Resource, filled once at startup.

    Registration order is kept so routes (and the OpenAPI document) list
    collections in the order they were declared.
    """

    def __init__(self) -> None:
        self._resources: Dict[Tuple[str, str], Resource] = {}

    def register(
        self,
        version: str,
        collection: str,
        model: Type[Base],
        serializer: Serializer,
    ) -> Resource:
        for label, value in (("version", version), ("collection", collection)):
            if not _SEGMENT.match(value):
                raise RegistryError(
                    message=f"Invalid {label} '{value}': expected one lowercase path segment",
                    context={label: value},
                )

        key = (version, collection)
        if key in self._resources:
            raise RegistryError(
                message=f"Collection '{collection}' is already registered for {version}",
                context={"version": version, "collection": collection},
            )

        resource = Resource(version, collection, model, serializer)
        self._resources[key] = resource
        logger.debug("Registered %s → %s via %r", resource.path, model.__name__, serializer)
        return resource

    def get(self, version: str, collection: str) -> Resource:
        try:
            return self._resources[(version, collection)]
        except KeyError:
            raise NotFoundError(resource="collection", resource_id=f"{version}/{collection}")

    def versions(self) -> Tuple[str, ...]:
        return tuple(sorted({version for version, _ in self._resources}))

    def resources(self, version: str) -> Tuple[Resource, ...]:
        return tuple(r for (v, _), r in self._resources.items() if v == version)

    def __iter__(self) -> Iterator[Resource]:
        return iter(self._resources.values())

    def __len__(self) -> int:
        return len(self._resources)

    def __contains__(self, key: object) -> bool:
        return key in self._resources


def build_default_registry() -> ApiRegistry:
    """The registration table the application is started with."""
    registry = ApiRegistry()
    registry.register("v1", "campers", Camper, camper_serializer)
    registry.register("v1", "campsites", Campsite, campsite_serializer)
    return registry
