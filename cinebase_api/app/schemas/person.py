"""
Pydantic models for directors and actors.

Directors and actors share the same fields; they only live in
different collections and get different id prefixes.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class PersonBase(BaseModel):
    id: str
    name: str = Field(..., example="Alfonso Cuarón")
    nationality: str = Field(..., example="Mexicano")
    birthYear: int = Field(..., example=1961)
    birthPlace: str = Field("", example="Ciudad de México")
    notableAwards: List[str] = Field(default_factory=list)


class Director(PersonBase):
    """Schema for a director record."""
    pass


class Actor(PersonBase):
    """Schema for an actor record."""
    pass


class DirectorList(BaseModel):
    count: int
    directors: List[Dict[str, Any]]


class ActorList(BaseModel):
    count: int
    actors: List[Dict[str, Any]]


class DirectorMovies(BaseModel):
    """A director together with every movie that references them."""

    director: Dict[str, Any]
    moviesCount: int
    movies: List[Dict[str, Any]]


class ActorMovies(BaseModel):
    """An actor with their movies; each movie carries ``characterName``."""

    actor: Dict[str, Any]
    moviesCount: int
    movies: List[Dict[str, Any]]
