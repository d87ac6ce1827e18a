"""Image repository - SQLite implementation."""

from dataclasses import dataclass
from typing import List, Optional

from astronaut_api.app.repositories.base import SQLiteRepository
from astronaut_api.app.schemas.image import ImageCreate, ImageUpdate


@dataclass(frozen=True)
class ImageRow:
    id: int
    name: str
    path: str


class ImageRepository(SQLiteRepository):
    """Repository for the ``images`` table."""

    def get_all(self) -> List[ImageRow]:
        rows = self._fetch_all("SELECT id, name, path FROM images ORDER BY id ASC")
        return [ImageRow(id=row["id"], name=row["name"], path=row["path"]) for row in rows]

    def get_by_id(self, image_id: int) -> Optional[ImageRow]:
        row = self._fetch_one("SELECT id, name, path FROM images WHERE id = ?", (image_id,))
        if row is None:
            return None
        return ImageRow(id=row["id"], name=row["name"], path=row["path"])

    def create(self, data: ImageCreate) -> int:
        return self._insert(
            "INSERT INTO images (name, path) VALUES (?, ?)",
            (data.name, data.path),
        )

    def update(self, image_id: int, data: ImageUpdate) -> int:
        return self._modify(
            "UPDATE images SET name = ?, path = ? WHERE id = ?",
            (data.name, data.path, image_id),
        )

    def delete(self, image_id: int) -> int:
        return self._modify("DELETE FROM images WHERE id = ?", (image_id,))
