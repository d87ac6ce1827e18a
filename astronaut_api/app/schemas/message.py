"""Acknowledgement returned by update and delete operations."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    message: str = Field(..., examples=["Planet updated successfully"])
