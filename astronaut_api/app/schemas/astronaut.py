"""
Pydantic models for astronaut data.

``AstronautCreate`` leaves every field optional: the create endpoint
reports absent or empty fields itself with a single "Missing required
fields" error before the service is involved.  Updates replace all
fields and are validated by pydantic as usual.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from astronaut_api.app.core.db import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN

from .planet import OriginPlanet


class AstronautCreate(BaseModel):
    """Schema for creating an astronaut."""

    model_config = ConfigDict(populate_by_name=True)

    firstname: Optional[str] = Field(None, examples=["Neil"])
    lastname: Optional[str] = Field(None, examples=["Armstrong"])
    origin_planet_id: Optional[int] = Field(
        None, alias="originPlanetId", ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX, examples=[1]
    )

    def has_required_fields(self) -> bool:
        return bool(self.firstname and self.lastname and self.origin_planet_id)


class AstronautUpdate(BaseModel):
    """Schema for replacing the fields of an existing astronaut."""

    model_config = ConfigDict(populate_by_name=True)

    firstname: str
    lastname: str
    origin_planet_id: int = Field(
        ..., alias="originPlanetId", ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX
    )


class AstronautCreated(BaseModel):
    """Echo of a freshly created astronaut with its assigned id."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    firstname: str
    lastname: str
    origin_planet_id: int = Field(..., alias="originPlanetId")


class AstronautRead(BaseModel):
    """Astronaut with its origin planet (and that planet's image) nested."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    firstname: str
    lastname: str
    origin_planet: OriginPlanet = Field(..., alias="originPlanet")
