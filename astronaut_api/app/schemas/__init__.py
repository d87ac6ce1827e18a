"""
Pydantic schema definitions for API payloads.

Each resource (images, planets, astronauts) defines its own request
and response models.  Schemas are separated from the repository row
records to decouple the API representation from persistence.
"""
