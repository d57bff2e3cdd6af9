"""
Pydantic models for movie data.

``Movie`` describes the canonical shape of a movie record and is used
to build the seed fixtures.  Records in the store are plain
dictionaries because ``PUT`` performs a shallow merge of whatever the
client sends, so the response envelopes below type their items as
``Dict[str, Any]`` rather than ``Movie``.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Movie(BaseModel):
    id: str = Field(..., example="mx_001")
    title: str = Field(..., example="Y tu mamá también")
    releaseYear: int = Field(..., example=2001)
    genre: List[str] = Field(..., example=["Drama", "Road Movie"])
    duration: int = Field(..., example=105, description="Running time in minutes")
    directorId: str = Field(..., example="dir_mx_001")
    rating: float = Field(0, example=7.7)
    language: str = Field("Spanish", example="Español")
    country: str = Field("Mexico", example="México")


class MovieList(BaseModel):
    """Response for ``GET /api/movies``."""

    count: int
    movies: List[Dict[str, Any]]


class MovieDetail(BaseModel):
    """A movie with its director resolved and its cast attached.

    Every field of the stored record is passed through unchanged.
    ``director`` is ``None`` when the movie points at a director that
    is not in the store.
    """

    director: Optional[Dict[str, Any]]
    actors: List[Dict[str, Any]]

    model_config = {
        "extra": "allow",
    }


class MovieDeleted(BaseModel):
    """Response for ``DELETE /api/movies/{id}``."""

    message: str
    deletedMovie: Dict[str, Any]
