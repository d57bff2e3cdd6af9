"""
Service layer for the movie/actor cast relation.

A cast link records that an actor plays ``characterName`` in a movie.
Both ends must exist when the link is created and a pair can only be
linked once.  Links disappear together with their movie (see
``MovieService.delete_movie``).
"""

import logging
from typing import Any, Dict, List

from ..core.errors import ConflictError, NotFoundError, UnprocessableEntityError
from ..core.store import Record, Store
from .validation import require_fields


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["actorId", "characterName"]


class CastService:
    """Attach actors to movies and list a movie's cast."""

    @classmethod
    async def add_actor(cls, store: Store, movie_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Link an actor to a movie.

        Checks run in this order: required fields (400), movie exists
        (404), actor exists (422), pair not linked yet (409).  The
        response names the movie and the actor instead of echoing the
        link itself.
        """
        require_fields(payload, REQUIRED_FIELDS)
        actor_id = payload["actorId"]
        character_name = payload["characterName"]
        with store.lock:
            movie = store.find_movie(movie_id)
            if movie is None:
                raise NotFoundError("Movie not found", movieId=movie_id)
            actor = store.find_actor(actor_id)
            if actor is None:
                logger.warning("Rejected cast link for movie %s: unknown actor %s", movie_id, actor_id)
                raise UnprocessableEntityError("The specified actor does not exist", actorId=actor_id)
            existing = store.find_link(movie_id, actor_id)
            if existing is not None:
                logger.warning("Rejected cast link %s/%s: already linked", movie_id, actor_id)
                raise ConflictError(
                    "This actor is already assigned to this movie",
                    existingRelation=existing,
                )
            store.movie_actors.append(
                {"movieId": movie_id, "actorId": actor_id, "characterName": character_name}
            )
        logger.info("Linked actor %s to movie %s as '%s'", actor_id, movie_id, character_name)
        return {
            "message": "Actor added to the movie successfully",
            "movie": movie.get("title"),
            "actor": actor.get("name"),
            "characterName": character_name,
        }

    @classmethod
    async def list_cast(cls, store: Store, movie_id: str) -> Dict[str, Any]:
        """Return ``{movie, actorsCount, actors}`` for an existing movie."""
        with store.lock:
            movie = store.find_movie(movie_id)
            if movie is None:
                raise NotFoundError("Movie not found", movieId=movie_id)
            cast = cls.cast_of(store, movie_id)
        return {"movie": movie.get("title"), "actorsCount": len(cast), "actors": cast}

    @staticmethod
    def cast_of(store: Store, movie_id: str) -> List[Record]:
        """Actor records merged with their ``characterName`` for one movie.

        Links are returned in the order they were created.  A link whose
        actor is missing yields just the ``characterName``.  Caller must
        hold ``store.lock``.
        """
        cast = []
        for link in store.movie_actors:
            if link["movieId"] != movie_id:
                continue
            actor = store.find_actor(link["actorId"]) or {}
            cast.append({**actor, "characterName": link["characterName"]})
        return cast
