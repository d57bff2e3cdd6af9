"""
Business logic for movies.

``MovieService`` lists, reads, creates, updates and deletes movies in
the in-memory ``Store``.  Every operation validates completely before
touching the store, so a rejected request never leaves a partial
change behind.  Deleting a movie also removes its cast links; the
director and actors it referenced are left alone.
"""

import logging
from typing import Any, Dict, Optional

from ..core.config import settings
from ..core.errors import ConflictError, NotFoundError, UnprocessableEntityError
from ..core.store import Record, Store
from .cast_service import CastService
from .filters import any_tag_contains, apply_filters, at_least, at_most, parse_float, parse_int
from .validation import as_list, is_blank, or_default, require_fields, same_name


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["title", "releaseYear", "genre", "duration", "directorId"]


class MovieService:
    """Operations on the movie collection."""

    @classmethod
    async def list_movies(
        cls,
        store: Store,
        genre: Optional[str] = None,
        min_rating: Optional[str] = None,
        min_year: Optional[str] = None,
        max_year: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Return ``{count, movies}`` for the movies matching every filter.

        - ``genre``: case-insensitive substring of any genre tag.
        - ``min_rating``: ``rating >= float(min_rating)``.
        - ``min_year`` / ``max_year``: inclusive bounds on ``releaseYear``.
        """
        predicates = []
        if genre:
            predicates.append(any_tag_contains("genre", genre))
        if min_rating:
            predicates.append(at_least("rating", parse_float(min_rating)))
        if min_year:
            predicates.append(at_least("releaseYear", parse_int(min_year)))
        if max_year:
            predicates.append(at_most("releaseYear", parse_int(max_year)))
        with store.lock:
            movies = apply_filters(store.movies, predicates)
        return {"count": len(movies), "movies": movies}

    @classmethod
    async def get_movie(cls, store: Store, movie_id: str) -> Dict[str, Any]:
        """Return the movie with its ``director`` resolved and its cast as ``actors``."""
        with store.lock:
            movie = store.find_movie(movie_id)
            if movie is None:
                raise NotFoundError("Movie not found", id=movie_id)
            director = store.find_director(movie.get("directorId"))
            cast = CastService.cast_of(store, movie_id)
        return {**movie, "director": director, "actors": cast}

    @classmethod
    async def create_movie(cls, store: Store, payload: Dict[str, Any]) -> Record:
        """Validate ``payload`` and append a new movie.

        Raises ``BadRequestError`` for missing fields,
        ``UnprocessableEntityError`` when the director does not exist and
        ``ConflictError`` when a movie with the same title
        (case-insensitive) and release year already exists.
        """
        require_fields(payload, REQUIRED_FIELDS)
        title = payload["title"]
        release_year = payload["releaseYear"]
        director_id = payload["directorId"]
        with store.lock:
            if store.find_director(director_id) is None:
                logger.warning("Rejected movie '%s': unknown director %s", title, director_id)
                raise UnprocessableEntityError("The specified director does not exist", directorId=director_id)
            existing = next(
                (
                    m for m in store.movies
                    if same_name(m.get("title"), title) and m.get("releaseYear") == release_year
                ),
                None,
            )
            if existing is not None:
                logger.warning("Rejected movie '%s' (%s): duplicate of %s", title, release_year, existing["id"])
                raise ConflictError(
                    "A movie with that title and year already exists",
                    existingMovie=existing,
                )
            movie = {
                "id": store.new_id("movie"),
                "title": title,
                "releaseYear": release_year,
                "genre": as_list(payload["genre"]),
                "duration": payload["duration"],
                "directorId": director_id,
                "rating": or_default(payload.get("rating"), 0),
                "language": or_default(payload.get("language"), settings.default_language),
                "country": or_default(payload.get("country"), settings.default_country),
            }
            store.movies.append(movie)
        logger.info("Created movie %s '%s'", movie["id"], title)
        return movie

    @classmethod
    async def update_movie(cls, store: Store, movie_id: str, payload: Dict[str, Any]) -> Record:
        """Shallow-merge ``payload`` into the stored movie.

        The path id always wins over any ``id`` in the body.  A changed
        ``directorId`` must point at an existing director.  A scalar
        ``genre`` is wrapped in a list, as on creation; no other field
        is type checked.
        """
        with store.lock:
            index = store.movie_index(movie_id)
            if index == -1:
                raise NotFoundError("Movie not found", id=movie_id)
            current = store.movies[index]
            director_id = payload.get("directorId")
            if not is_blank(director_id) and director_id != current.get("directorId"):
                if store.find_director(director_id) is None:
                    logger.warning("Rejected update of movie %s: unknown director %s", movie_id, director_id)
                    raise UnprocessableEntityError(
                        "The specified director does not exist",
                        directorId=director_id,
                    )
            updated = {**current, **payload, "id": movie_id}
            if "genre" in payload:
                updated["genre"] = as_list(updated["genre"])
            store.movies[index] = updated
        logger.info("Updated movie %s (%s)", movie_id, ", ".join(sorted(payload)) or "no fields")
        return updated

    @classmethod
    async def delete_movie(cls, store: Store, movie_id: str) -> Dict[str, Any]:
        """Remove the movie and every cast link that references it."""
        with store.lock:
            index = store.movie_index(movie_id)
            if index == -1:
                raise NotFoundError("Movie not found", id=movie_id)
            deleted = store.movies.pop(index)
            remaining = [link for link in store.movie_actors if link["movieId"] != movie_id]
            removed_links = len(store.movie_actors) - len(remaining)
            store.movie_actors[:] = remaining
        logger.info("Deleted movie %s and %d cast link(s)", movie_id, removed_links)
        return {"message": "Movie deleted successfully", "deletedMovie": deleted}

