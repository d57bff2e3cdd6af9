import asyncio
import math
import re
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from cinebase_api.app.core.errors import BadRequestError, ConflictError
from cinebase_api.app.core.seed import seed_store
from cinebase_api.app.core.store import SequentialIds, Store, timestamp_id
from cinebase_api.app.services.cast_service import CastService
from cinebase_api.app.services.filters import (
    any_tag_contains,
    apply_filters,
    at_least,
    parse_float,
    parse_int,
)
from cinebase_api.app.services.person_service import DirectorService
from cinebase_api.app.services.validation import is_blank, require_fields


def test_timestamp_id_format():
    assert re.fullmatch(r"dir_\d{13}_[0-9a-z]{9}", timestamp_id("dir"))


def test_sequential_ids_count_per_prefix():
    ids = SequentialIds()
    assert [ids("movie"), ids("movie"), ids("act")] == ["movie_1", "movie_2", "act_1"]


def test_seed_counts():
    store = seed_store(Store())
    assert store.counts() == {"movies": 1, "directors": 1, "actors": 2, "movieActors": 2}


def test_find_link_returns_first_match():
    store = Store()
    store.movie_actors.extend([
        {"movieId": "m", "actorId": "a", "characterName": "first"},
        {"movieId": "m", "actorId": "a", "characterName": "second"},
    ])
    assert store.find_link("m", "a")["characterName"] == "first"
    assert store.find_link("m", "b") is None


@pytest.mark.parametrize("text, expected", [
    ("7.5", 7.5),
    ("  8", 8.0),
    ("7.5abc", 7.5),
    (".5", 0.5),
    ("-2", -2.0),
    ("1e2", 100.0),
])
def test_parse_float(text, expected):
    assert parse_float(text) == expected


@pytest.mark.parametrize("text", ["abc", "", "-", "."])
def test_parse_float_nan(text):
    assert math.isnan(parse_float(text))


def test_parse_int():
    assert parse_int("2000.9") == 2000
    assert parse_int("0x7D1") == 0
    assert parse_int(" 1999x") == 1999
    assert math.isnan(parse_int("year"))


def test_nan_bound_matches_nothing():
    records = [{"rating": 1}, {"rating": 10}]
    assert apply_filters(records, [at_least("rating", math.nan)]) == []


def test_non_numeric_field_never_matches():
    assert apply_filters([{"rating": "9"}], [at_least("rating", 1)]) == []


def test_any_tag_contains():
    match = any_tag_contains("genre", "ROAD")
    assert match({"genre": ["Drama", "Road Movie"]})
    assert not match({"genre": ["Drama"]})
    assert not match({"genre": None})


@pytest.mark.parametrize("value, blank", [
    (None, True),
    (False, True),
    ("", True),
    (0, True),
    (float("nan"), True),
    ([], False),
    ("x", False),
    (1970, False),
])
def test_is_blank(value, blank):
    assert is_blank(value) is blank


def test_require_fields_lists_missing():
    with pytest.raises(BadRequestError) as excinfo:
        require_fields({"a": 1, "b": ""}, ["a", "b", "c"])
    assert excinfo.value.to_dict() == {
        "error": "Missing required fields",
        "missing": ["b", "c"],
        "required": ["a", "b", "c"],
    }


def _race(count, call):
    """Run ``call`` from ``count`` threads at once, each with its own event loop."""
    barrier = threading.Barrier(count)

    def worker(_):
        barrier.wait()
        try:
            asyncio.run(call())
            return "ok"
        except ConflictError:
            return "conflict"

    with ThreadPoolExecutor(max_workers=count) as pool:
        return list(pool.map(worker, range(count)))


def test_concurrent_director_creates_keep_names_unique(empty_store):
    payload = {"name": "Test Director", "nationality": "Test", "birthYear": 1970}
    outcomes = _race(8, lambda: DirectorService.create_person(empty_store, payload))
    assert outcomes.count("ok") == 1
    assert outcomes.count("conflict") == 7
    assert len(empty_store.directors) == 1


def test_concurrent_cast_links_are_not_duplicated(store):
    payload = {"actorId": "act_mx_001", "characterName": "Double"}
    movie_id = store.movies[0]["id"]
    store.movie_actors.clear()
    outcomes = _race(8, lambda: CastService.add_actor(store, movie_id, payload))
    assert outcomes.count("ok") == 1
    assert len(store.movie_actors) == 1
