import pytest


@pytest.fixture
def director_payload():
    return {"name": "Test Director", "nationality": "Test", "birthYear": 1970}


def test_list_directors(client):
    body = client.get("/api/directors").json()
    assert body["count"] == 1
    assert body["directors"][0]["name"] == "Alfonso Cuarón"


def test_list_directors_filters(client, director_payload):
    client.post("/api/directors", json=director_payload)
    assert client.get("/api/directors", params={"nationality": "MEX"}).json()["count"] == 1
    assert client.get("/api/directors", params={"minBirthYear": "1965"}).json()["count"] == 1
    assert client.get("/api/directors", params={"minBirthYear": "1900"}).json()["count"] == 2
    assert client.get("/api/directors", params={"nationality": "test", "minBirthYear": "1971"}).json()["count"] == 0
    assert client.get("/api/directors", params={"minBirthYear": "x"}).json()["count"] == 0


def test_create_director_then_duplicate(client, director_payload):
    resp = client.post("/api/directors", json=director_payload)
    assert resp.status_code == 201
    director = resp.json()
    assert director["id"].startswith("dir_")
    assert director["birthPlace"] == ""
    assert director["notableAwards"] == []

    resp = client.post("/api/directors", json={**director_payload, "name": "test director"})
    assert resp.status_code == 409
    assert resp.json()["existingDirector"]["id"] == director["id"]
    assert client.get("/api/directors").json()["count"] == 2


def test_create_director_missing_fields(client):
    resp = client.post("/api/directors", json={"name": "Nobody"})
    assert resp.status_code == 400
    assert resp.json()["missing"] == ["nationality", "birthYear"]


def test_director_movies(client, make_movie):
    make_movie()
    body = client.get("/api/directors/dir_mx_001/movies").json()
    assert body["director"]["id"] == "dir_mx_001"
    assert body["moviesCount"] == 2
    assert [m["title"] for m in body["movies"]] == ["Y tu mamá también", "Roma"]


def test_director_movies_not_found(client):
    resp = client.get("/api/directors/dir_ghost/movies")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Director not found", "id": "dir_ghost"}


def test_list_actors(client):
    body = client.get("/api/actors", params={"minBirthYear": "1979"}).json()
    assert [a["name"] for a in body["actors"]] == ["Diego Luna"]


def test_create_actor(client):
    resp = client.post("/api/actors", json={
        "name": "Yalitza Aparicio",
        "nationality": "Mexicana",
        "birthYear": 1993,
        "notableAwards": ["Ariel"],
    })
    assert resp.status_code == 201
    actor = resp.json()
    assert actor["id"] == "act_1"
    assert actor["notableAwards"] == ["Ariel"]


def test_create_actor_duplicate_name(client):
    resp = client.post("/api/actors", json={"name": "diego luna", "nationality": "x", "birthYear": 1})
    assert resp.status_code == 409
    assert resp.json()["existingActor"]["id"] == "act_mx_002"


def test_actor_and_director_names_are_separate(client):
    resp = client.post("/api/actors", json={"name": "Alfonso Cuarón", "nationality": "Mexicano", "birthYear": 1961})
    assert resp.status_code == 201


def test_actor_movies_carry_character_name(client):
    body = client.get("/api/actors/act_mx_002/movies").json()
    assert body["actor"]["name"] == "Diego Luna"
    assert body["moviesCount"] == 1
    assert body["movies"][0]["id"] == "mx_001"
    assert body["movies"][0]["characterName"] == "Tenoch Iturbide"


def test_actor_movies_not_found(client):
    resp = client.get("/api/actors/act_ghost/movies")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Actor not found"
