"""
In-memory entity store.

The store owns the four collections the API works with: movies,
directors, actors and the movie/actor cast links.  Records are plain
dictionaries kept in insertion order; nothing is persisted, so the
data lives exactly as long as the process (or, in tests, as long as
the ``Store`` instance).

One store is created per application in ``create_app`` and handed to
route handlers through the ``get_store`` dependency.  Services wrap
every check-then-act sequence (uniqueness check then append, lookup
then merge, lookup then cascade delete) in ``with store.lock:`` so the
invariants hold even when handlers run on several threads.
"""

import random
import string
import threading
import time
from itertools import count
from typing import Any, Callable, Dict, Iterator, List, Optional

from fastapi import Request


Record = Dict[str, Any]
IdGenerator = Callable[[str], str]

_ID_ALPHABET = string.digits + string.ascii_lowercase


def timestamp_id(prefix: str) -> str:
    """Return ``{prefix}_{epoch millis}_{9 random base-36 chars}``.

    Unique enough for a single process; not collision proof.
    """
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{prefix}_{int(time.time() * 1000)}_{suffix}"


class SequentialIds:
    """Deterministic id generator producing ``{prefix}_1``, ``{prefix}_2``...

    Each prefix has its own counter.
    """

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._counters: Dict[str, Iterator[int]] = {}
        self._lock = threading.Lock()

    def __call__(self, prefix: str) -> str:
        with self._lock:
            counter = self._counters.setdefault(prefix, count(self._start))
            return f"{prefix}_{next(counter)}"


class Store:
    """Process-wide container for the four collections."""

    def __init__(self, id_generator: Optional[IdGenerator] = None) -> None:
        self.movies: List[Record] = []
        self.directors: List[Record] = []
        self.actors: List[Record] = []
        self.movie_actors: List[Record] = []
        self.lock = threading.RLock()
        self._id_generator = id_generator or timestamp_id

    def new_id(self, prefix: str) -> str:
        return self._id_generator(prefix)

    # Lookups -----------------------------------------------------------

    @staticmethod
    def _find(collection: List[Record], entity_id: Any) -> Optional[Record]:
        return next((item for item in collection if item.get("id") == entity_id), None)

    def find_movie(self, movie_id: Any) -> Optional[Record]:
        return self._find(self.movies, movie_id)

    def find_director(self, director_id: Any) -> Optional[Record]:
        return self._find(self.directors, director_id)

    def find_actor(self, actor_id: Any) -> Optional[Record]:
        return self._find(self.actors, actor_id)

    def find_link(self, movie_id: Any, actor_id: Any) -> Optional[Record]:
        """Return the first cast link for the pair, if any."""
        return next(
            (
                link
                for link in self.movie_actors
                if link["movieId"] == movie_id and link["actorId"] == actor_id
            ),
            None,
        )

    def movie_index(self, movie_id: Any) -> int:
        """Position of the movie in ``movies`` or ``-1``."""
        for index, movie in enumerate(self.movies):
            if movie.get("id") == movie_id:
                return index
        return -1

    def counts(self) -> Dict[str, int]:
        return {
            "movies": len(self.movies),
            "directors": len(self.directors),
            "actors": len(self.actors),
            "movieActors": len(self.movie_actors),
        }


def get_store(request: Request) -> Store:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store
