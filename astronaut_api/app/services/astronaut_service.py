"""
Service layer for astronauts.

Astronauts may only originate from an existing, habitable planet.
Both conditions are checked on create and on update; on update they
are checked before the astronaut's own existence, so an update that
names a bad planet always reports the planet problem first.

The validation read and the write are separate statements without a
surrounding transaction, so a planet could change between the two.
"""

import logging
from typing import List, Optional

from astronaut_api.app.core.errors import BadRequestError, NotFoundError
from astronaut_api.app.repositories.astronaut_repository import (
    AstronautRepository,
    AstronautRow,
)
from astronaut_api.app.schemas.astronaut import (
    AstronautCreate,
    AstronautCreated,
    AstronautRead,
    AstronautUpdate,
)
from astronaut_api.app.schemas.image import ImageSummary
from astronaut_api.app.schemas.message import MessageResponse
from astronaut_api.app.schemas.planet import OriginPlanet

logger = logging.getLogger(__name__)

ASTRONAUT_NOT_FOUND = "Astronaut not found"
ORIGIN_PLANET_NOT_FOUND = "Origin planet not found"
PLANET_NOT_HABITABLE = "Astronauts can only be associated with habitable planets"


class AstronautService:
    """Service for managing astronauts."""

    def __init__(self, repository: AstronautRepository):
        self.repository = repository

    async def get_all(self) -> List[AstronautRead]:
        return [self._row_to_astronaut_read(row) for row in self.repository.get_all()]

    async def get_by_id(self, astronaut_id: int) -> AstronautRead:
        row = self.repository.get_by_id(astronaut_id)
        if row is None:
            raise NotFoundError(ASTRONAUT_NOT_FOUND)
        return self._row_to_astronaut_read(row)

    async def create(self, data: AstronautCreate) -> AstronautCreated:
        self._ensure_habitable_origin(data.origin_planet_id)
        astronaut_id = self.repository.create(data)
        logger.info(
            "Created astronaut %s (%s %s)", astronaut_id, data.firstname, data.lastname
        )
        return AstronautCreated(
            id=astronaut_id,
            firstname=data.firstname,
            lastname=data.lastname,
            origin_planet_id=data.origin_planet_id,
        )

    async def update(self, astronaut_id: int, data: AstronautUpdate) -> MessageResponse:
        self._ensure_habitable_origin(data.origin_planet_id)
        if self.repository.update(astronaut_id, data) == 0:
            raise NotFoundError(ASTRONAUT_NOT_FOUND)
        logger.info("Updated astronaut %s", astronaut_id)
        return MessageResponse(message="Astronaut updated successfully")

    async def delete(self, astronaut_id: int) -> MessageResponse:
        if self.repository.delete(astronaut_id) == 0:
            raise NotFoundError(ASTRONAUT_NOT_FOUND)
        logger.info("Deleted astronaut %s", astronaut_id)
        return MessageResponse(message="Astronaut deleted successfully")

    def _ensure_habitable_origin(self, planet_id: Optional[int]) -> None:
        planet = self.repository.get_planet_by_id(planet_id) if planet_id else None
        if planet is None:
            raise NotFoundError(ORIGIN_PLANET_NOT_FOUND)
        if planet.is_habitable == 0:
            raise BadRequestError(PLANET_NOT_HABITABLE)

    @staticmethod
    def _row_to_astronaut_read(row: AstronautRow) -> AstronautRead:
        return AstronautRead(
            id=row.id,
            firstname=row.firstname,
            lastname=row.lastname,
            origin_planet=OriginPlanet(
                name=row.planet_name,
                is_habitable=row.planet_is_habitable == 1,
                description=row.planet_description,
                image=ImageSummary(path=row.image_path, name=row.image_name),
            ),
        )
