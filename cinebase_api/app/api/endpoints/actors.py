"""
Actor endpoints.

Same contract as the director routes; movies are found through the
cast links and carry the character the actor plays.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from cinebase_api.app.core.store import Store, get_store
from cinebase_api.app.schemas.common import ErrorResponse
from cinebase_api.app.schemas.person import ActorList, ActorMovies
from cinebase_api.app.services.person_service import ActorService


router = APIRouter()


@router.get("", response_model=ActorList)
@router.get("/", response_model=ActorList, include_in_schema=False)
async def list_actors(
    nationality: Optional[str] = Query(None),
    minBirthYear: Optional[str] = Query(None),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    return await ActorService.list_people(store, nationality=nationality, min_birth_year=minBirthYear)


@router.get("/{actor_id}/movies", response_model=ActorMovies, responses={404: {"model": ErrorResponse}})
async def list_actor_movies(actor_id: str, store: Store = Depends(get_store)) -> Dict[str, Any]:
    return await ActorService.list_movies(store, actor_id)


@router.post(
    "",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
@router.post("/", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_actor(
    payload: Dict[str, Any] = Body(default={}),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    """Create an actor (``name``, ``nationality``, ``birthYear`` required)."""
    return await ActorService.create_person(store, payload)
