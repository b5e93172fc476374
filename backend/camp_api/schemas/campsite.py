from pydantic import BaseModel, Field


class CampsiteV1(BaseModel):
    """Public fields of a campsite in API v1."""

    id: int = Field(description="Store-assigned campsite identifier")
    name: str = Field(description="Display name of the campsite")

    model_config = {"from_attributes": True}
