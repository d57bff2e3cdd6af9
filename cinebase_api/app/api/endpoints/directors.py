"""
Director endpoints.

Directors can be listed, created and queried for their movies.  There
are no update or delete routes.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from cinebase_api.app.core.store import Store, get_store
from cinebase_api.app.schemas.common import ErrorResponse
from cinebase_api.app.schemas.person import DirectorList, DirectorMovies
from cinebase_api.app.services.person_service import DirectorService


router = APIRouter()


@router.get("", response_model=DirectorList)
@router.get("/", response_model=DirectorList, include_in_schema=False)
async def list_directors(
    nationality: Optional[str] = Query(None, description="Substring of the nationality, case-insensitive"),
    minBirthYear: Optional[str] = Query(None, description="Earliest birth year (inclusive)"),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    return await DirectorService.list_people(store, nationality=nationality, min_birth_year=minBirthYear)


@router.get("/{director_id}/movies", response_model=DirectorMovies, responses={404: {"model": ErrorResponse}})
async def list_director_movies(director_id: str, store: Store = Depends(get_store)) -> Dict[str, Any]:
    """Return the director and every movie they directed."""
    return await DirectorService.list_movies(store, director_id)


@router.post(
    "",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
@router.post("/", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_director(
    payload: Dict[str, Any] = Body(default={}),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    """Create a director.

    Requires ``name``, ``nationality`` and ``birthYear``.  Names are
    unique regardless of case.
    """
    return await DirectorService.create_person(store, payload)
