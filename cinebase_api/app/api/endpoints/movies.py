"""
Movie endpoints.

CRUD routes for the movie collection.  Request bodies are accepted as
free-form JSON objects; presence of the required fields is checked by
``MovieService`` which raises the domain errors rendered by the
application's exception handler.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from cinebase_api.app.core.store import Store, get_store
from cinebase_api.app.schemas.common import ErrorResponse
from cinebase_api.app.schemas.movie import MovieDeleted, MovieDetail, MovieList
from cinebase_api.app.services.movie_service import MovieService


router = APIRouter()


@router.get("", response_model=MovieList)
@router.get("/", response_model=MovieList, include_in_schema=False)
async def list_movies(
    genre: Optional[str] = Query(None, description="Substring of any genre tag, case-insensitive"),
    minRating: Optional[str] = Query(None, description="Minimum rating (inclusive)"),
    minYear: Optional[str] = Query(None, description="Earliest release year (inclusive)"),
    maxYear: Optional[str] = Query(None, description="Latest release year (inclusive)"),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    """List movies, optionally filtered.

    Filters combine with AND.  Numeric filters that cannot be parsed
    match nothing.
    """
    return await MovieService.list_movies(
        store,
        genre=genre,
        min_rating=minRating,
        min_year=minYear,
        max_year=maxYear,
    )


@router.get("/{movie_id}", response_model=MovieDetail, responses={404: {"model": ErrorResponse}})
async def get_movie(movie_id: str, store: Store = Depends(get_store)) -> Dict[str, Any]:
    """Retrieve a movie with its director and cast."""
    return await MovieService.get_movie(store, movie_id)


@router.post(
    "",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
@router.post("/", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_movie(
    payload: Dict[str, Any] = Body(default={}),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    """Create a movie.

    Requires ``title``, ``releaseYear``, ``genre``, ``duration`` and
    ``directorId``.  ``rating``, ``language`` and ``country`` are
    optional.
    """
    return await MovieService.create_movie(store, payload)


@router.put(
    "/{movie_id}",
    response_model=Dict[str, Any],
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def update_movie(
    movie_id: str,
    payload: Dict[str, Any] = Body(default={}),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    """Merge the body into an existing movie; the id cannot change."""
    return await MovieService.update_movie(store, movie_id, payload)


@router.delete("/{movie_id}", response_model=MovieDeleted, responses={404: {"model": ErrorResponse}})
async def delete_movie(movie_id: str, store: Store = Depends(get_store)) -> Dict[str, Any]:
    """Delete a movie together with its cast links."""
    return await MovieService.delete_movie(store, movie_id)
