"""
Planet endpoints for API v1.

Planets are listed together with their image.  The list endpoint
accepts an optional ``name`` query parameter that keeps only planets
whose name contains the given text.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from astronaut_api.app.api.deps import EntityId, get_planet_service
from astronaut_api.app.schemas.message import MessageResponse
from astronaut_api.app.schemas.planet import PlanetCreate, PlanetCreated, PlanetRead, PlanetUpdate
from astronaut_api.app.services.planet_service import PlanetService

router = APIRouter()


@router.get("/", response_model=List[PlanetRead])
async def list_planets(
    name: Optional[str] = Query(None, description="Substring the planet name must contain"),
    service: PlanetService = Depends(get_planet_service),
) -> List[PlanetRead]:
    return await service.get_all(name)


@router.get("/{planet_id}", response_model=PlanetRead)
async def get_planet(
    planet_id: EntityId,
    service: PlanetService = Depends(get_planet_service),
) -> PlanetRead:
    return await service.get_by_id(planet_id)


@router.post("/", response_model=PlanetCreated, status_code=status.HTTP_201_CREATED)
async def create_planet(
    planet_in: PlanetCreate,
    service: PlanetService = Depends(get_planet_service),
) -> PlanetCreated:
    """Create a planet.  Returns 404 if ``imageId`` names no image."""
    return await service.create(planet_in)


@router.put("/{planet_id}", response_model=MessageResponse)
async def update_planet(
    planet_id: EntityId,
    planet_in: PlanetUpdate,
    service: PlanetService = Depends(get_planet_service),
) -> MessageResponse:
    """Replace a planet's fields.

    The referenced image is checked first, then the planet itself, so
    both failures report as 404 with different messages.
    """
    return await service.update(planet_id, planet_in)


@router.delete("/{planet_id}", response_model=MessageResponse)
async def delete_planet(
    planet_id: EntityId,
    service: PlanetService = Depends(get_planet_service),
) -> MessageResponse:
    return await service.delete(planet_id)
