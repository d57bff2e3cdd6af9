"""
Top-level router for the ``/api`` prefix.

This router aggregates the domain routers (movies, cast, directors,
actors).  The cast routes live under ``/movies`` next to the movie
routes because they are addressed through a movie id.
"""

from fastapi import APIRouter

from .endpoints import actors, cast, directors, movies


router = APIRouter()

router.include_router(movies.router, prefix="/movies", tags=["movies"])
router.include_router(cast.router, prefix="/movies", tags=["cast"])
router.include_router(directors.router, prefix="/directors", tags=["directors"])
router.include_router(actors.router, prefix="/actors", tags=["actors"])
