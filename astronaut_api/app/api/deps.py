"""
Shared dependencies for API routes.

Each request gets its own SQLite connection from ``get_db``; the
factories below build a repository on that connection and wrap it in
the matching service.  Tests swap storage by overriding ``get_db``
through ``app.dependency_overrides``.
"""

import sqlite3
from typing import Annotated

from fastapi import Depends, Path

from astronaut_api.app.core.db import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN, get_db
from astronaut_api.app.repositories.astronaut_repository import AstronautRepository
from astronaut_api.app.repositories.image_repository import ImageRepository
from astronaut_api.app.repositories.planet_repository import PlanetRepository
from astronaut_api.app.services.astronaut_service import AstronautService
from astronaut_api.app.services.image_service import ImageService
from astronaut_api.app.services.planet_service import PlanetService

# Path id of any resource.  Values SQLite cannot store are rejected as
# malformed instead of reaching the query.
EntityId = Annotated[int, Path(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)]


def get_image_service(conn: sqlite3.Connection = Depends(get_db)) -> ImageService:
    return ImageService(ImageRepository(conn))


def get_planet_service(conn: sqlite3.Connection = Depends(get_db)) -> PlanetService:
    return PlanetService(PlanetRepository(conn))


def get_astronaut_service(conn: sqlite3.Connection = Depends(get_db)) -> AstronautService:
    return AstronautService(AstronautRepository(conn))
