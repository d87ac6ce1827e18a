"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from astronaut_api.app.core.db import get_connection, get_db, init_db
from astronaut_api.app.main import app
from astronaut_api.app.repositories.astronaut_repository import AstronautRepository
from astronaut_api.app.repositories.image_repository import ImageRepository
from astronaut_api.app.repositories.planet_repository import PlanetRepository
from astronaut_api.app.schemas.image import ImageCreate
from astronaut_api.app.schemas.planet import PlanetCreate


@pytest.fixture
def db_path(tmp_path):
    """Path of a throwaway SQLite database file."""
    return str(tmp_path / "astronauts_test.db")


@pytest.fixture
def conn(db_path):
    """Connection to a freshly initialised database with foreign keys enforced."""
    connection = get_connection(db_path, enforce_foreign_keys=True)
    init_db(connection)
    yield connection
    connection.close()


@pytest.fixture
def image_repo(conn):
    return ImageRepository(conn)


@pytest.fixture
def planet_repo(conn):
    return PlanetRepository(conn)


@pytest.fixture
def astronaut_repo(conn):
    return AstronautRepository(conn)


@pytest.fixture
def earth(image_repo, planet_repo):
    """Seed an image and a habitable planet; return their ids."""
    image_id = image_repo.create(ImageCreate(name="Earth Image", path="/img/earth.png"))
    planet_id = planet_repo.create(
        PlanetCreate(name="Earth", description="Blue Planet", isHabitable=True, imageId=image_id)
    )
    return {"image_id": image_id, "planet_id": planet_id}


@pytest.fixture
def mars(earth, planet_repo):
    """Seed an uninhabitable planet sharing Earth's image; return its id."""
    return planet_repo.create(
        PlanetCreate(name="Mars", description="Red Planet", isHabitable=False, imageId=earth["image_id"])
    )


@pytest.fixture
def client(conn):
    """Test client whose requests all use the test connection."""

    async def override_get_db():
        yield conn

    app.dependency_overrides[get_db] = override_get_db
    # Not entered as a context manager so the startup hook does not
    # initialise the default database.
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
