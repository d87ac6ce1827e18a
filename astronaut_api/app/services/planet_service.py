"""
Service layer for planets.

A planet must point at an existing image.  The image check runs on
both create and update and, for updates, before the planet's own
existence is known: a request that is wrong on both counts reports
the missing image.

Listing and fetching reshape the flat planet/image join into the
nested response, turning the stored 0/1 habitability flag into a
boolean.
"""

import logging
from typing import List, Optional

from astronaut_api.app.core.errors import NotFoundError
from astronaut_api.app.repositories.planet_repository import PlanetRepository, PlanetRow
from astronaut_api.app.schemas.image import ImageSummary
from astronaut_api.app.schemas.message import MessageResponse
from astronaut_api.app.schemas.planet import (
    PlanetBase,
    PlanetCreate,
    PlanetCreated,
    PlanetRead,
    PlanetUpdate,
)

logger = logging.getLogger(__name__)

PLANET_NOT_FOUND = "Planet not found"
IMAGE_NOT_FOUND = "Image not found"


class PlanetService:
    """Service for managing planets."""

    def __init__(self, repository: PlanetRepository):
        self.repository = repository

    async def get_all(self, name: Optional[str] = None) -> List[PlanetRead]:
        """Return all planets, filtered by a name substring when given."""
        return [self._row_to_planet_read(row) for row in self.repository.get_all(name)]

    async def get_by_id(self, planet_id: int) -> PlanetRead:
        row = self.repository.get_by_id(planet_id)
        if row is None:
            raise NotFoundError(PLANET_NOT_FOUND)
        return self._row_to_planet_read(row)

    async def create(self, data: PlanetCreate) -> PlanetCreated:
        self._ensure_image_exists(data)
        planet_id = self.repository.create(data)
        logger.info("Created planet %s (%s)", planet_id, data.name)
        return PlanetCreated(id=planet_id, **data.model_dump())

    async def update(self, planet_id: int, data: PlanetUpdate) -> MessageResponse:
        self._ensure_image_exists(data)
        if self.repository.update(planet_id, data) == 0:
            raise NotFoundError(PLANET_NOT_FOUND)
        logger.info("Updated planet %s", planet_id)
        return MessageResponse(message="Planet updated successfully")

    async def delete(self, planet_id: int) -> MessageResponse:
        if self.repository.delete(planet_id) == 0:
            raise NotFoundError(PLANET_NOT_FOUND)
        logger.info("Deleted planet %s", planet_id)
        return MessageResponse(message="Planet deleted successfully")

    def _ensure_image_exists(self, data: PlanetBase) -> None:
        if self.repository.get_image_by_id(data.image_id) is None:
            raise NotFoundError(IMAGE_NOT_FOUND)

    @staticmethod
    def _row_to_planet_read(row: PlanetRow) -> PlanetRead:
        return PlanetRead(
            id=row.id,
            name=row.name,
            is_habitable=row.is_habitable == 1,
            description=row.description,
            image=ImageSummary(path=row.image_path, name=row.image_name),
        )
