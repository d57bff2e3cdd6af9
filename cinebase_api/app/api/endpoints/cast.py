"""
Cast endpoints.

Routes nested under a movie for attaching actors and listing the
cast.  Mounted under the ``/movies`` prefix next to the movie routes.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from cinebase_api.app.core.store import Store, get_store
from cinebase_api.app.schemas.cast import CastAssignment, CastList
from cinebase_api.app.schemas.common import ErrorResponse
from cinebase_api.app.services.cast_service import CastService


router = APIRouter()


@router.post(
    "/{movie_id}/actors",
    response_model=CastAssignment,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def add_actor_to_movie(
    movie_id: str,
    payload: Dict[str, Any] = Body(default={}),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    """Cast an actor in a movie (body: ``actorId``, ``characterName``)."""
    return await CastService.add_actor(store, movie_id, payload)


@router.get("/{movie_id}/actors", response_model=CastList, responses={404: {"model": ErrorResponse}})
async def list_movie_actors(movie_id: str, store: Store = Depends(get_store)) -> Dict[str, Any]:
    """List the actors of a movie with the characters they play."""
    return await CastService.list_cast(store, movie_id)
