"""
Top-level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
When a new resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import astronauts, images, info, planets

router = APIRouter()

router.include_router(images.router, prefix="/images", tags=["images"])
router.include_router(planets.router, prefix="/planets", tags=["planets"])
router.include_router(astronauts.router, prefix="/astronauts", tags=["astronauts"])
router.include_router(info.router, prefix="/info", tags=["info"])
