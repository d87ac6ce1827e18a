"""Astronaut repository - SQLite implementation."""

import sqlite3
from dataclasses import dataclass
from typing import List, Optional

from astronaut_api.app.repositories.base import SQLiteRepository
from astronaut_api.app.schemas.astronaut import AstronautCreate, AstronautUpdate


@dataclass(frozen=True)
class AstronautRow:
    """An astronaut joined to its origin planet and that planet's image."""

    id: int
    firstname: str
    lastname: str
    origin_planet_id: int
    planet_name: str
    planet_is_habitable: int
    planet_description: str
    image_path: str
    image_name: str


@dataclass(frozen=True)
class PlanetHabitabilityRow:
    """Narrow projection used for the origin planet check."""

    id: int
    is_habitable: int


# Columns are listed one by one: selecting ``planets.*`` alongside
# ``astronauts.*`` would let the planet id shadow the astronaut id.
_SELECT_JOINED = """
    SELECT astronauts.id, astronauts.firstname, astronauts.lastname,
           astronauts.originPlanetId,
           planets.name AS planetName, planets.isHabitable AS planetIsHabitable,
           planets.description AS planetDescription,
           images.path AS imagePath, images.name AS imageName
    FROM astronauts
    JOIN planets ON planets.id = astronauts.originPlanetId
    JOIN images ON images.id = planets.imageId
"""


def _to_row(row: sqlite3.Row) -> AstronautRow:
    return AstronautRow(
        id=row["id"],
        firstname=row["firstname"],
        lastname=row["lastname"],
        origin_planet_id=row["originPlanetId"],
        planet_name=row["planetName"],
        planet_is_habitable=row["planetIsHabitable"],
        planet_description=row["planetDescription"],
        image_path=row["imagePath"],
        image_name=row["imageName"],
    )


class AstronautRepository(SQLiteRepository):
    """Repository for the ``astronauts`` table, joined to planets and images."""

    def get_all(self) -> List[AstronautRow]:
        rows = self._fetch_all(_SELECT_JOINED + " ORDER BY astronauts.id ASC")
        return [_to_row(row) for row in rows]

    def get_by_id(self, astronaut_id: int) -> Optional[AstronautRow]:
        row = self._fetch_one(_SELECT_JOINED + " WHERE astronauts.id = ?", (astronaut_id,))
        return _to_row(row) if row is not None else None

    def create(self, data: AstronautCreate) -> int:
        return self._insert(
            "INSERT INTO astronauts (firstname, lastname, originPlanetId) VALUES (?, ?, ?)",
            (data.firstname, data.lastname, data.origin_planet_id),
        )

    def update(self, astronaut_id: int, data: AstronautUpdate) -> int:
        return self._modify(
            """
            UPDATE astronauts
            SET firstname = ?, lastname = ?, originPlanetId = ?
            WHERE id = ?
            """,
            (data.firstname, data.lastname, data.origin_planet_id, astronaut_id),
        )

    def delete(self, astronaut_id: int) -> int:
        return self._modify("DELETE FROM astronauts WHERE id = ?", (astronaut_id,))

    def get_planet_by_id(self, planet_id: int) -> Optional[PlanetHabitabilityRow]:
        row = self._fetch_one(
            "SELECT id, isHabitable FROM planets WHERE id = ?", (planet_id,)
        )
        if row is None:
            return None
        return PlanetHabitabilityRow(id=row["id"], is_habitable=row["isHabitable"])
