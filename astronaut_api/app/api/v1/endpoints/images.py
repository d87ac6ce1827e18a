"""
Image endpoints for API v1.

Plain CRUD over images.  Errors raised by ``ImageService`` are turned
into responses by the application-level handlers, so the handlers
here only call the service and pick the success status.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from astronaut_api.app.api.deps import EntityId, get_image_service
from astronaut_api.app.schemas.image import ImageCreate, ImageRead, ImageUpdate
from astronaut_api.app.schemas.message import MessageResponse
from astronaut_api.app.services.image_service import ImageService

router = APIRouter()


@router.get("/", response_model=List[ImageRead])
async def list_images(service: ImageService = Depends(get_image_service)) -> List[ImageRead]:
    return await service.get_all()


@router.get("/{image_id}", response_model=ImageRead)
async def get_image(
    image_id: EntityId,
    service: ImageService = Depends(get_image_service),
) -> ImageRead:
    """Retrieve a single image by its ID.  Returns 404 if it does not exist."""
    return await service.get_by_id(image_id)


@router.post("/", response_model=ImageRead, status_code=status.HTTP_201_CREATED)
async def create_image(
    image_in: ImageCreate,
    service: ImageService = Depends(get_image_service),
) -> ImageRead:
    return await service.create(image_in)


@router.put("/{image_id}", response_model=MessageResponse)
async def update_image(
    image_id: EntityId,
    image_in: ImageUpdate,
    service: ImageService = Depends(get_image_service),
) -> MessageResponse:
    return await service.update(image_id, image_in)


@router.delete("/{image_id}", response_model=MessageResponse)
async def delete_image(
    image_id: EntityId,
    service: ImageService = Depends(get_image_service),
) -> MessageResponse:
    """Delete an image.

    Nothing cascades to planets that still use the image: with foreign
    keys enforced the storage refuses the delete, otherwise those
    planets simply drop out of joined listings.
    """
    return await service.delete(image_id)
