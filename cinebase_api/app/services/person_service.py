"""
Business logic for directors and actors.

Both collections follow the same rules: list with a nationality and
minimum birth year filter, create with a case-insensitive unique name,
and look up the movies a person worked on.  ``PersonService`` holds
that shared logic; ``DirectorService`` and ``ActorService`` bind it to
their collection and id prefix and add the movie lookups, which
differ (directors are referenced from movies, actors through cast
links).

Neither directors nor actors can be updated or deleted.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.errors import ConflictError, NotFoundError
from ..core.store import Record, Store
from .filters import apply_filters, nationality_filters
from .validation import or_default, require_fields, same_name


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["name", "nationality", "birthYear"]


class PersonService:
    """Shared operations for person collections.

    Subclasses set ``kind`` (singular label, also the response key),
    ``plural`` (list response key), ``id_prefix`` and
    ``collection_name`` (attribute of ``Store``).
    """

    kind: str = "person"
    plural: str = "people"
    id_prefix: str = "person"
    collection_name: str = ""

    @classmethod
    def _collection(cls, store: Store) -> List[Record]:
        return getattr(store, cls.collection_name)

    @classmethod
    def _not_found(cls, person_id: str) -> NotFoundError:
        return NotFoundError(f"{cls.kind.capitalize()} not found", id=person_id)

    @classmethod
    async def list_people(
        cls,
        store: Store,
        nationality: Optional[str] = None,
        min_birth_year: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Return ``{count, <plural>}`` filtered by nationality substring and birth year."""
        predicates = nationality_filters(nationality, min_birth_year)
        with store.lock:
            people = apply_filters(cls._collection(store), predicates)
        return {"count": len(people), cls.plural: people}

    @classmethod
    async def create_person(cls, store: Store, payload: Dict[str, Any]) -> Record:
        """Validate ``payload`` and append a new person.

        ``birthPlace`` defaults to an empty string and ``notableAwards``
        to an empty list.
        """
        require_fields(payload, REQUIRED_FIELDS)
        name = payload["name"]
        with store.lock:
            collection = cls._collection(store)
            existing = next((p for p in collection if same_name(p.get("name"), name)), None)
            if existing is not None:
                logger.warning("Rejected %s '%s': name already taken by %s", cls.kind, name, existing["id"])
                raise ConflictError(
                    f"A {cls.kind} with that name already exists",
                    **{f"existing{cls.kind.capitalize()}": existing},
                )
            person = {
                "id": store.new_id(cls.id_prefix),
                "name": name,
                "nationality": payload["nationality"],
                "birthYear": payload["birthYear"],
                "birthPlace": or_default(payload.get("birthPlace"), ""),
                "notableAwards": or_default(payload.get("notableAwards"), []),
            }
            collection.append(person)
        logger.info("Created %s %s '%s'", cls.kind, person["id"], name)
        return person


class DirectorService(PersonService):
    kind = "director"
    plural = "directors"
    id_prefix = "dir"
    collection_name = "directors"

    @classmethod
    async def list_movies(cls, store: Store, director_id: str) -> Dict[str, Any]:
        """Return the director with every movie whose ``directorId`` matches."""
        with store.lock:
            director = store.find_director(director_id)
            if director is None:
                raise cls._not_found(director_id)
            movies = [m for m in store.movies if m.get("directorId") == director_id]
        return {"director": director, "moviesCount": len(movies), "movies": movies}


class ActorService(PersonService):
    kind = "actor"
    plural = "actors"
    id_prefix = "act"
    collection_name = "actors"

    @classmethod
    async def list_movies(cls, store: Store, actor_id: str) -> Dict[str, Any]:
        """Return the actor with their movies, each carrying ``characterName``.

        Movies come back in movie-collection order.  If the same pair
        were linked twice, the first link's character name is used.
        """
        with store.lock:
            actor = store.find_actor(actor_id)
            if actor is None:
                raise cls._not_found(actor_id)
            movie_ids = {link["movieId"] for link in store.movie_actors if link["actorId"] == actor_id}
            movies = [
                {**movie, "characterName": store.find_link(movie["id"], actor_id)["characterName"]}
                for movie in store.movies
                if movie.get("id") in movie_ids
            ]
        return {"actor": actor, "moviesCount": len(movies), "movies": movies}
