"""
Camper API schemas, one per API generation.

Each class is the complete allowlist of attributes a version exposes.
Adding a field here publishes it; anything not declared (timestamps,
relationships) is dropped during projection.
"""

from pydantic import BaseModel, Field


class CamperV1(BaseModel):
    id: int = Field(description="Store-assigned camper identifier")
    name: str = Field(description="Camper's display name")
    campsite_id: int = Field(description="Identifier of the camper's campsite")

    model_config = {"from_attributes": True}
