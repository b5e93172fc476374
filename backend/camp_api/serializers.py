"""
Camp API Backend: Allowlist Serializers
========================================

What:  Turns ORM records into the JSON bodies served by collection routes.
How:   A Serializer pairs a top-level key with a pydantic schema. The schema's
       declared fields are the allowlist: each record is validated against it
       (reading attributes), extra attributes are ignored, and the projected
       dicts are wrapped under the key.

    records ──▶ schema.model_validate(r, from_attributes=True) ──▶ {root: [...]}

Serializers are composed, not subclassed. Two API generations of the same
entity are two Serializer instances with different schemas:

    camper_serializer = Serializer("campers", CamperV1)

Missing attributes:
    A record that lacks an allowlisted attribute is a server-side defect, not
    something to paper over with nulls. It raises SerializationError (→ 500)
    naming the fields. An attribute that exists with value None is emitted
    as null only if the schema allows it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple, Type

from pydantic import BaseModel, ValidationError, create_model

from camp_api.exceptions import SerializationError
from camp_api.schemas.camper import CamperV1
from camp_api.schemas.campsite import CampsiteV1

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Serializer:
    """
    Projects records onto a static field allowlist under a named root key.

    Args:
        root:    Top-level key of the JSON object, the pluralized entity name
                 (e.g. "campers"). Must be a valid identifier.
        schema:  Pydantic model whose fields are the allowlist.
    """

    root: str
    schema: Type[BaseModel]
    # Response model for OpenAPI: {"<root>": [<schema>, ...]}
    collection_model: Type[BaseModel] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.root.isidentifier():
            raise ValueError(f"Serializer root '{self.root}' must be a valid identifier")
        object.__setattr__(
            self,
            "collection_model",
            create_model(
                f"{self.schema.__name__}Collection",
                **{self.root: (List[self.schema], ...)},
            ),
        )

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(self.schema.model_fields)

    def project(self, record: Any) -> Dict[str, Any]:
        """Return exactly the allowlisted fields of one record, JSON-ready."""
        try:
            projected = self.schema.model_validate(record, from_attributes=True)
        except ValidationError as e:
            bad_fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            missing = sorted(
                {str(err["loc"][0]) for err in e.errors() if err["type"] == "missing" and err["loc"]}
            )
            logger.error(
                "Cannot serialize %r for '%s': invalid fields %s",
                record, self.root, bad_fields,
            )
            raise SerializationError(
                context={
                    "root": self.root,
                    "fields": bad_fields,
                    "missing": missing,
                    "record": repr(record),
                },
            ) from e
        return projected.model_dump(mode="json")

    def dump(self, records: Iterable[Any]) -> Dict[str, List[Dict[str, Any]]]:
        """Serialize a whole collection: {root: [project(r) for r in records]}."""
        return {self.root: [self.project(record) for record in records]}

    def __repr__(self) -> str:
        return f"Serializer(root={self.root!r}, fields={list(self.fields)})"


camper_serializer = Serializer("campers", CamperV1)
campsite_serializer = Serializer("campsites", CampsiteV1)
