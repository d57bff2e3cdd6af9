"""
Sample data loaded into a fresh store at startup.

``seed_store`` inserts one director, two actors, one movie and the two
cast links between them.  The fixtures are validated through the
Pydantic schemas before they are stored as plain dictionaries, the
same shape records created through the API have.
"""

import logging

from ..schemas.cast import CastLink
from ..schemas.movie import Movie
from ..schemas.person import Actor, Director
from .store import Store


logger = logging.getLogger(__name__)


DIRECTORS = [
    Director(
        id="dir_mx_001",
        name="Alfonso Cuarón",
        nationality="Mexicano",
        birthYear=1961,
        birthPlace="Ciudad de México",
        notableAwards=["2 Óscares", "3 Premios BAFTA", "Globo de Oro"],
    ),
]

ACTORS = [
    Actor(
        id="act_mx_001",
        name="Gael García Bernal",
        nationality="Mexicano",
        birthYear=1978,
        birthPlace="Guadalajara, Jalisco",
        notableAwards=["Premio del Festival de Cannes", "2 Premios BAFTA"],
    ),
    Actor(
        id="act_mx_002",
        name="Diego Luna",
        nationality="Mexicano",
        birthYear=1979,
        birthPlace="Toluca, Estado de México",
        notableAwards=["Premio Marcello Mastroianni", "Diosa de Plata"],
    ),
]

MOVIES = [
    Movie(
        id="mx_001",
        title="Y tu mamá también",
        releaseYear=2001,
        genre=["Drama", "Road Movie", "Coming of Age"],
        duration=105,
        directorId="dir_mx_001",
        rating=7.7,
        language="Español",
        country="México",
    ),
]

CAST = [
    CastLink(movieId="mx_001", actorId="act_mx_001", characterName="Julio Zapata"),
    CastLink(movieId="mx_001", actorId="act_mx_002", characterName="Tenoch Iturbide"),
]


def seed_store(store: Store) -> Store:
    """Append the sample records to ``store`` and return it."""
    with store.lock:
        store.directors.extend(d.model_dump() for d in DIRECTORS)
        store.actors.extend(a.model_dump() for a in ACTORS)
        store.movies.extend(m.model_dump() for m in MOVIES)
        store.movie_actors.extend(link.model_dump() for link in CAST)
    logger.debug("Seeded store: %s", store.counts())
    return store
