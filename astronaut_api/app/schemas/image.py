"""
Pydantic models for image data.

Images are leaf entities: a display name and a path to the picture
file.  Planets reference them through ``imageId`` and embed a
reduced ``ImageSummary`` in their responses.
"""

from pydantic import BaseModel, Field


class ImageBase(BaseModel):
    name: str = Field(..., examples=["Earth Image"])
    path: str = Field(..., examples=["/img/earth.png"])


class ImageCreate(ImageBase):
    """Schema for creating an image."""
    pass


class ImageUpdate(ImageBase):
    """Schema for replacing the fields of an existing image."""
    pass


class ImageRead(ImageBase):
    """Schema for reading an image from the API."""

    id: int


class ImageSummary(BaseModel):
    """Image fields embedded in planet responses."""

    path: str
    name: str
