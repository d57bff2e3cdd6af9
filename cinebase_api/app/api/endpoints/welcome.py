"""
Welcome endpoint.

``GET /`` returns a short greeting and the entry points of the API so
clients can discover the collections without reading the docs.
"""

from fastapi import APIRouter

from cinebase_api.app.core.config import settings
from cinebase_api.app.schemas.common import Welcome


router = APIRouter()


@router.get("/", response_model=Welcome)
async def welcome() -> Welcome:
    return Welcome(
        message=f"Welcome to {settings.project_name}",
        endpoints={
            "movies": "/api/movies",
            "directors": "/api/directors",
            "actors": "/api/actors",
        },
    )
