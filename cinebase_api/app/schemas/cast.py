"""
Pydantic models for the movie/actor cast relation.

A ``CastLink`` joins one actor to one movie and records the character
they play.  Links have no identifier of their own; the
``(movieId, actorId)`` pair is unique.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class CastLink(BaseModel):
    movieId: str = Field(..., example="mx_001")
    actorId: str = Field(..., example="act_mx_001")
    characterName: str = Field(..., example="Julio Zapata")


class CastAssignment(BaseModel):
    """Confirmation returned after attaching an actor to a movie.

    ``movie`` and ``actor`` hold the movie title and the actor name,
    not the full records.
    """

    message: str
    movie: Any
    actor: Any
    characterName: Any


class CastList(BaseModel):
    """Response for ``GET /api/movies/{movieId}/actors``."""

    movie: Any
    actorsCount: int
    actors: List[Dict[str, Any]]
