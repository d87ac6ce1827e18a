"""
Information endpoint for API v1.

Returns the project name and API version so clients can check which
deployment they are talking to.
"""

from typing import Dict

from fastapi import APIRouter

from astronaut_api.app.core.config import settings

router = APIRouter()


@router.get("/", response_model=Dict[str, str])
async def get_info() -> Dict[str, str]:
    return {"name": settings.project_name, "version": settings.api_version}
