"""Integration tests for API endpoints."""

import pytest
from fastapi.testclient import TestClient

from astronaut_api.app.core.config import settings
from astronaut_api.app.main import app

API = "/api/v1"

EARTH_IMAGE = {"name": "Earth Image", "path": "/img/earth.png"}
EARTH = {"name": "Earth", "description": "Blue Planet", "isHabitable": True, "imageId": 1}
NEIL = {"firstname": "Neil", "lastname": "Armstrong", "originPlanetId": 1}


@pytest.fixture
def seeded(client):
    """Create Earth's image, Earth and Neil Armstrong through the API."""
    assert client.post(f"{API}/images/", json=EARTH_IMAGE).json()["id"] == 1
    assert client.post(f"{API}/planets/", json=EARTH).json()["id"] == 1
    assert client.post(f"{API}/astronauts/", json=NEIL).json()["id"] == 1
    return client


class TestImageAPI:
    """Test image CRUD endpoints."""

    def test_create_and_get(self, client):
        response = client.post(f"{API}/images/", json=EARTH_IMAGE)

        assert response.status_code == 201
        assert response.json() == {"id": 1, **EARTH_IMAGE}

        response = client.get(f"{API}/images/1")
        assert response.status_code == 200
        assert response.json() == {"id": 1, **EARTH_IMAGE}

    def test_list(self, client):
        client.post(f"{API}/images/", json=EARTH_IMAGE)
        client.post(f"{API}/images/", json={"name": "Mars Image", "path": "/img/mars.png"})

        response = client.get(f"{API}/images/")

        assert response.status_code == 200
        assert [image["name"] for image in response.json()] == ["Earth Image", "Mars Image"]

    def test_update_and_delete(self, client):
        client.post(f"{API}/images/", json=EARTH_IMAGE)

        response = client.put(f"{API}/images/1", json={"name": "Renamed", "path": "/img/r.png"})
        assert response.status_code == 200
        assert response.json() == {"message": "Image updated successfully"}
        assert client.get(f"{API}/images/1").json()["name"] == "Renamed"

        response = client.delete(f"{API}/images/1")
        assert response.status_code == 200
        assert response.json() == {"message": "Image deleted successfully"}

    @pytest.mark.parametrize(
        "method, kwargs",
        [
            ("get", {}),
            ("put", {"json": EARTH_IMAGE}),
            ("delete", {}),
        ],
    )
    def test_missing_image_is_404(self, client, method, kwargs):
        response = getattr(client, method)(f"{API}/images/999", **kwargs)

        assert response.status_code == 404
        assert response.json() == {"error": "Image not found"}

    def test_missing_field_is_400(self, client):
        response = client.post(f"{API}/images/", json={"name": "no path"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    def test_non_integer_id_is_400(self, client):
        response = client.get(f"{API}/images/abc")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request parameters"}


class TestPlanetAPI:
    """Test planet endpoints."""

    def test_create_requires_existing_image(self, client):
        response = client.post(f"{API}/planets/", json=EARTH)

        assert response.status_code == 404
        assert response.json() == {"error": "Image not found"}

    def test_create_and_get(self, client):
        client.post(f"{API}/images/", json=EARTH_IMAGE)

        response = client.post(f"{API}/planets/", json=EARTH)
        assert response.status_code == 201
        assert response.json() == {"id": 1, **EARTH}

        response = client.get(f"{API}/planets/1")
        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "name": "Earth",
            "isHabitable": True,
            "description": "Blue Planet",
            "image": {"path": "/img/earth.png", "name": "Earth Image"},
        }

    def test_list_filtered_by_name(self, client):
        client.post(f"{API}/images/", json=EARTH_IMAGE)
        client.post(f"{API}/planets/", json=EARTH)
        client.post(f"{API}/planets/", json={**EARTH, "name": "Mars", "isHabitable": False})

        all_planets = client.get(f"{API}/planets/").json()
        assert [p["name"] for p in all_planets] == ["Earth", "Mars"]

        filtered = client.get(f"{API}/planets/", params={"name": "ars"}).json()
        assert [p["name"] for p in filtered] == ["Mars"]
        assert filtered[0]["isHabitable"] is False
        assert filtered[0]["image"] == {"path": "/img/earth.png", "name": "Earth Image"}

    def test_update_with_missing_image_reports_image(self, client):
        response = client.put(f"{API}/planets/999", json={**EARTH, "imageId": 42})

        assert response.status_code == 404
        assert response.json() == {"error": "Image not found"}

    def test_update_missing_planet(self, client):
        client.post(f"{API}/images/", json=EARTH_IMAGE)

        response = client.put(f"{API}/planets/999", json=EARTH)

        assert response.status_code == 404
        assert response.json() == {"error": "Planet not found"}

    def test_update_and_delete(self, client):
        client.post(f"{API}/images/", json=EARTH_IMAGE)
        client.post(f"{API}/planets/", json=EARTH)

        response = client.put(f"{API}/planets/1", json={**EARTH, "isHabitable": False})
        assert response.json() == {"message": "Planet updated successfully"}
        assert client.get(f"{API}/planets/1").json()["isHabitable"] is False

        response = client.delete(f"{API}/planets/1")
        assert response.status_code == 200
        assert response.json() == {"message": "Planet deleted successfully"}
        assert client.get(f"{API}/planets/1").status_code == 404


class TestAstronautAPI:
    """Test astronaut endpoints, including the habitability rule."""

    def test_get_nested_astronaut(self, seeded):
        response = seeded.get(f"{API}/astronauts/1")

        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "firstname": "Neil",
            "lastname": "Armstrong",
            "originPlanet": {
                "name": "Earth",
                "isHabitable": True,
                "description": "Blue Planet",
                "image": {"path": "/img/earth.png", "name": "Earth Image"},
            },
        }

    def test_list(self, seeded):
        seeded.post(f"{API}/astronauts/", json={**NEIL, "firstname": "Buzz", "lastname": "Aldrin"})

        response = seeded.get(f"{API}/astronauts/")

        assert response.status_code == 200
        assert [(a["id"], a["firstname"]) for a in response.json()] == [(1, "Neil"), (2, "Buzz")]

    def test_create_echoes_fields(self, seeded):
        response = seeded.post(f"{API}/astronauts/", json={**NEIL, "firstname": "Sally", "lastname": "Ride"})

        assert response.status_code == 201
        assert response.json() == {"id": 2, "firstname": "Sally", "lastname": "Ride", "originPlanetId": 1}

    @pytest.mark.parametrize(
        "body",
        [
            {"firstname": "John"},
            {"firstname": "", "lastname": "Doe", "originPlanetId": 1},
            {"firstname": "John", "lastname": "Doe"},
        ],
    )
    def test_create_with_missing_fields(self, client, body):
        response = client.post(f"{API}/astronauts/", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    def test_create_with_unknown_planet(self, client):
        response = client.post(f"{API}/astronauts/", json={**NEIL, "originPlanetId": 999})

        assert response.status_code == 404
        assert response.json() == {"error": "Origin planet not found"}

    def test_uninhabitable_planet_is_rejected(self, seeded):
        mars = seeded.post(f"{API}/planets/", json={**EARTH, "name": "Mars", "isHabitable": False}).json()
        assert mars["id"] == 2

        create = seeded.post(f"{API}/astronauts/", json={**NEIL, "originPlanetId": 2})
        update = seeded.put(f"{API}/astronauts/1", json={**NEIL, "originPlanetId": 2})

        for response in (create, update):
            assert response.status_code == 400
            assert response.json() == {
                "error": "Astronauts can only be associated with habitable planets"
            }

    def test_update_missing_astronaut_with_valid_planet(self, seeded):
        response = seeded.put(f"{API}/astronauts/999", json=NEIL)

        assert response.status_code == 404
        assert response.json() == {"error": "Astronaut not found"}

    def test_update_missing_astronaut_with_invalid_planet_reports_planet(self, seeded):
        response = seeded.put(f"{API}/astronauts/999", json={**NEIL, "originPlanetId": 42})

        assert response.status_code == 404
        assert response.json() == {"error": "Origin planet not found"}

    def test_update_with_missing_field(self, seeded):
        response = seeded.put(f"{API}/astronauts/1", json={"firstname": "Neil"})

        assert response.status_code == 400

    def test_update_and_delete(self, seeded):
        response = seeded.put(f"{API}/astronauts/1", json={**NEIL, "firstname": "Neil A."})
        assert response.status_code == 200
        assert response.json() == {"message": "Astronaut updated successfully"}
        assert seeded.get(f"{API}/astronauts/1").json()["firstname"] == "Neil A."

        response = seeded.delete(f"{API}/astronauts/1")
        assert response.status_code == 200
        assert response.json() == {"message": "Astronaut deleted successfully"}

        response = seeded.delete(f"{API}/astronauts/1")
        assert response.status_code == 404
        assert response.json() == {"error": "Astronaut not found"}


class TestReferencedDeleteAPI:
    """Deleting a row that is still referenced."""

    def test_storage_refusal_is_generic_500(self, seeded):
        response = seeded.delete(f"{API}/images/1")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}
        assert seeded.get(f"{API}/images/1").status_code == 200


class TestInfoAPI:
    def test_info(self, client):
        response = client.get(f"{API}/info/")

        assert response.status_code == 200
        assert response.json() == {"name": settings.project_name, "version": settings.api_version}


class TestOutOfRangeIds:
    """Ids SQLite cannot store are malformed input, not server errors."""

    HUGE_ID = 2 ** 70

    @pytest.mark.parametrize("resource", ["images", "planets", "astronauts"])
    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_huge_path_id_is_400(self, client, resource, method):
        response = getattr(client, method)(f"{API}/{resource}/{self.HUGE_ID}")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request parameters"}

    def test_huge_path_id_on_update_is_400(self, seeded):
        response = seeded.put(f"{API}/astronauts/{self.HUGE_ID}", json=NEIL)

        assert response.status_code == 400

    def test_huge_origin_planet_id_is_400(self, seeded):
        for response in (
            seeded.post(f"{API}/astronauts/", json={**NEIL, "originPlanetId": self.HUGE_ID}),
            seeded.put(f"{API}/astronauts/1", json={**NEIL, "originPlanetId": self.HUGE_ID}),
        ):
            assert response.status_code == 400
            assert response.json() == {"error": "Invalid request parameters"}

    def test_huge_image_id_is_400(self, seeded):
        response = seeded.post(f"{API}/planets/", json={**EARTH, "imageId": self.HUGE_ID})

        assert response.status_code == 400

    def test_largest_storable_id_is_404(self, client):
        response = client.get(f"{API}/images/{2 ** 63 - 1}")

        assert response.status_code == 404
        assert response.json() == {"error": "Image not found"}


class TestInMemoryDatabase:
    """``DATABASE_URL=:memory:`` keeps one database for the app's lifetime."""

    def test_schema_and_rows_survive_between_requests(self, monkeypatch):
        monkeypatch.setattr(settings, "database_url", ":memory:")

        with TestClient(app) as client:
            assert client.post(f"{API}/images/", json=EARTH_IMAGE).status_code == 201
            assert client.post(f"{API}/planets/", json=EARTH).status_code == 201

            response = client.get(f"{API}/planets/")
            assert response.status_code == 200
            assert [planet["name"] for planet in response.json()] == ["Earth"]

        assert app.state.db_anchor is None
