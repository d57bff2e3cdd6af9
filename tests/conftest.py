import pytest
from fastapi.testclient import TestClient

from cinebase_api.app.core.seed import seed_store
from cinebase_api.app.core.store import SequentialIds, Store
from cinebase_api.app.main import create_app


@pytest.fixture
def store():
    return seed_store(Store(id_generator=SequentialIds()))


@pytest.fixture
def empty_store():
    return Store(id_generator=SequentialIds())


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))


@pytest.fixture
def new_movie():
    return {
        "title": "Roma",
        "releaseYear": 2018,
        "genre": ["Drama"],
        "duration": 135,
        "directorId": "dir_mx_001",
        "rating": 7.7,
    }


@pytest.fixture
def make_movie(client, new_movie):
    def _make(**overrides):
        resp = client.post("/api/movies", json={**new_movie, **overrides})
        assert resp.status_code == 201, resp.json()
        return resp.json()
    return _make
