"""
Astronaut endpoints for API v1.

Astronauts are returned with their origin planet and its image
nested.  Creating an astronaut requires ``firstname``, ``lastname``
and ``originPlanetId``; the handler rejects a request missing any of
them before the service runs.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from astronaut_api.app.api.deps import EntityId, get_astronaut_service
from astronaut_api.app.core.errors import BadRequestError
from astronaut_api.app.schemas.astronaut import (
    AstronautCreate,
    AstronautCreated,
    AstronautRead,
    AstronautUpdate,
)
from astronaut_api.app.schemas.message import MessageResponse
from astronaut_api.app.services.astronaut_service import AstronautService

router = APIRouter()


@router.get("/", response_model=List[AstronautRead])
async def list_astronauts(
    service: AstronautService = Depends(get_astronaut_service),
) -> List[AstronautRead]:
    return await service.get_all()


@router.get("/{astronaut_id}", response_model=AstronautRead)
async def get_astronaut(
    astronaut_id: EntityId,
    service: AstronautService = Depends(get_astronaut_service),
) -> AstronautRead:
    return await service.get_by_id(astronaut_id)


@router.post("/", response_model=AstronautCreated, status_code=status.HTTP_201_CREATED)
async def create_astronaut(
    astronaut_in: AstronautCreate,
    service: AstronautService = Depends(get_astronaut_service),
) -> AstronautCreated:
    """Create an astronaut.

    Returns 400 when a required field is missing or the origin planet
    is not habitable, and 404 when the origin planet does not exist.
    """
    if not astronaut_in.has_required_fields():
        raise BadRequestError("Missing required fields")
    return await service.create(astronaut_in)


@router.put("/{astronaut_id}", response_model=MessageResponse)
async def update_astronaut(
    astronaut_id: EntityId,
    astronaut_in: AstronautUpdate,
    service: AstronautService = Depends(get_astronaut_service),
) -> MessageResponse:
    return await service.update(astronaut_id, astronaut_in)


@router.delete("/{astronaut_id}", response_model=MessageResponse)
async def delete_astronaut(
    astronaut_id: EntityId,
    service: AstronautService = Depends(get_astronaut_service),
) -> MessageResponse:
    return await service.delete(astronaut_id)
