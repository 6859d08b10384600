"""Template engine domain models.

Pydantic models specific to document generation. Kept here rather than in
the API layer so the generator has no web dependency.
"""

from pydantic import BaseModel, ConfigDict, Field


class NDAData(BaseModel):
    """Inputs for a generated NDA."""

    model_config = ConfigDict(populate_by_name=True)

    brand_name: str = Field(alias="brandName", description="Disclosing party")
    creator_name: str = Field(alias="creatorName", description="Receiving party")
    term: str = Field(description="How long the agreement stays in effect, e.g. '2 years'")


class NDAVariables(BaseModel):
    """Placeholder values for the NDA template."""

    brand_name: str
    creator_name: str
    term: str
    date: str
