"""
Pydantic models for planet data.

JSON payloads use camelCase keys (``isHabitable``, ``imageId``) while
the Python attributes are snake_case; every model accepts either
spelling on input and FastAPI serialises responses by alias.
Habitability is a boolean here even though storage keeps it as 0/1.
"""

from pydantic import BaseModel, ConfigDict, Field

from astronaut_api.app.core.db import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN

from .image import ImageSummary


class PlanetBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., examples=["Earth"])
    description: str = Field(..., examples=["Blue Planet"])
    is_habitable: bool = Field(..., alias="isHabitable", examples=[True])
    image_id: int = Field(
        ..., alias="imageId", ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX, examples=[1]
    )


class PlanetCreate(PlanetBase):
    """Schema for creating a planet."""
    pass


class PlanetUpdate(PlanetBase):
    """Schema for replacing the fields of an existing planet."""
    pass


class PlanetCreated(PlanetBase):
    """Echo of a freshly created planet with its assigned id."""

    id: int


class PlanetRead(BaseModel):
    """Planet as listed or fetched, with its image nested under ``image``."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    is_habitable: bool = Field(..., alias="isHabitable")
    description: str
    image: ImageSummary


class OriginPlanet(BaseModel):
    """Planet fields embedded in astronaut responses."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    is_habitable: bool = Field(..., alias="isHabitable")
    description: str
    image: ImageSummary
