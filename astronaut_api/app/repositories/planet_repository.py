"""Planet repository - SQLite implementation."""

import sqlite3
from dataclasses import dataclass
from typing import List, Optional

from astronaut_api.app.repositories.base import SQLiteRepository
from astronaut_api.app.schemas.planet import PlanetCreate, PlanetUpdate


@dataclass(frozen=True)
class PlanetRow:
    """A planet joined to its image.  ``is_habitable`` is the stored 0/1."""

    id: int
    name: str
    description: str
    is_habitable: int
    image_id: int
    image_path: str
    image_name: str


@dataclass(frozen=True)
class ImageSummaryRow:
    """Narrow projection used to check that a referenced image exists."""

    path: str
    name: str


_SELECT_JOINED = """
    SELECT planets.id, planets.name, planets.description, planets.isHabitable,
           planets.imageId, images.path AS imagePath, images.name AS imageName
    FROM planets
    JOIN images ON images.id = planets.imageId
"""


def _to_row(row: sqlite3.Row) -> PlanetRow:
    return PlanetRow(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        is_habitable=row["isHabitable"],
        image_id=row["imageId"],
        image_path=row["imagePath"],
        image_name=row["imageName"],
    )


class PlanetRepository(SQLiteRepository):
    """Repository for the ``planets`` table, joined to ``images``."""

    def get_all(self, name: Optional[str] = None) -> List[PlanetRow]:
        """List planets, optionally keeping only names containing ``name``.

        Matching uses SQL ``LIKE``, so it follows the storage collation
        (case-insensitive for ASCII in SQLite).
        """
        sql = _SELECT_JOINED
        params: list = []
        if name:
            sql += " WHERE planets.name LIKE ?"
            params.append(f"%{name}%")
        sql += " ORDER BY planets.id ASC"
        return [_to_row(row) for row in self._fetch_all(sql, params)]

    def get_by_id(self, planet_id: int) -> Optional[PlanetRow]:
        row = self._fetch_one(_SELECT_JOINED + " WHERE planets.id = ?", (planet_id,))
        return _to_row(row) if row is not None else None

    def create(self, data: PlanetCreate) -> int:
        return self._insert(
            """
            INSERT INTO planets (name, description, isHabitable, imageId)
            VALUES (?, ?, ?, ?)
            """,
            (data.name, data.description, int(data.is_habitable), data.image_id),
        )

    def update(self, planet_id: int, data: PlanetUpdate) -> int:
        return self._modify(
            """
            UPDATE planets
            SET name = ?, description = ?, isHabitable = ?, imageId = ?
            WHERE id = ?
            """,
            (data.name, data.description, int(data.is_habitable), data.image_id, planet_id),
        )

    def delete(self, planet_id: int) -> int:
        return self._modify("DELETE FROM planets WHERE id = ?", (planet_id,))

    def get_image_by_id(self, image_id: int) -> Optional[ImageSummaryRow]:
        row = self._fetch_one("SELECT path, name FROM images WHERE id = ?", (image_id,))
        if row is None:
            return None
        return ImageSummaryRow(path=row["path"], name=row["name"])
