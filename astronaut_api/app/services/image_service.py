"""
Service layer for images.

Images have no foreign keys, so every operation is a direct
delegation to ``ImageRepository`` plus the translation of "no row"
into ``NotFoundError``.
"""

import logging
from typing import List

from astronaut_api.app.core.errors import NotFoundError
from astronaut_api.app.repositories.image_repository import ImageRepository, ImageRow
from astronaut_api.app.schemas.image import ImageCreate, ImageRead, ImageUpdate
from astronaut_api.app.schemas.message import MessageResponse

logger = logging.getLogger(__name__)

IMAGE_NOT_FOUND = "Image not found"


class ImageService:
    """Service for managing images."""

    def __init__(self, repository: ImageRepository):
        self.repository = repository

    async def get_all(self) -> List[ImageRead]:
        return [self._row_to_image_read(row) for row in self.repository.get_all()]

    async def get_by_id(self, image_id: int) -> ImageRead:
        row = self.repository.get_by_id(image_id)
        if row is None:
            raise NotFoundError(IMAGE_NOT_FOUND)
        return self._row_to_image_read(row)

    async def create(self, data: ImageCreate) -> ImageRead:
        image_id = self.repository.create(data)
        logger.info("Created image %s", image_id)
        return ImageRead(id=image_id, **data.model_dump())

    async def update(self, image_id: int, data: ImageUpdate) -> MessageResponse:
        if self.repository.update(image_id, data) == 0:
            raise NotFoundError(IMAGE_NOT_FOUND)
        logger.info("Updated image %s", image_id)
        return MessageResponse(message="Image updated successfully")

    async def delete(self, image_id: int) -> MessageResponse:
        if self.repository.delete(image_id) == 0:
            raise NotFoundError(IMAGE_NOT_FOUND)
        logger.info("Deleted image %s", image_id)
        return MessageResponse(message="Image deleted successfully")

    @staticmethod
    def _row_to_image_read(row: ImageRow) -> ImageRead:
        return ImageRead(id=row.id, name=row.name, path=row.path)
