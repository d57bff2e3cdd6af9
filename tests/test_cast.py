def test_add_actor_to_movie(client, make_movie):
    movie = make_movie()
    resp = client.post(
        f"/api/movies/{movie['id']}/actors",
        json={"actorId": "act_mx_001", "characterName": "Extra"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["movie"] == "Roma"
    assert body["actor"] == "Gael García Bernal"
    assert body["characterName"] == "Extra"
    assert "movieId" not in body

    cast = client.get(f"/api/movies/{movie['id']}/actors").json()
    assert cast["actorsCount"] == 1
    assert cast["actors"][0]["id"] == "act_mx_001"


def test_add_actor_missing_fields(client):
    resp = client.post("/api/movies/mx_001/actors", json={"actorId": "act_mx_001"})
    assert resp.status_code == 400
    assert resp.json()["missing"] == ["characterName"]


def test_add_actor_unknown_movie(client):
    resp = client.post("/api/movies/nope/actors", json={"actorId": "act_mx_001", "characterName": "X"})
    assert resp.status_code == 404
    assert resp.json()["movieId"] == "nope"


def test_add_actor_unknown_actor(client, store):
    resp = client.post("/api/movies/mx_001/actors", json={"actorId": "act_ghost", "characterName": "X"})
    assert resp.status_code == 422
    assert resp.json()["actorId"] == "act_ghost"
    assert len(store.movie_actors) == 2


def test_add_actor_twice_conflicts(client, store):
    resp = client.post("/api/movies/mx_001/actors", json={"actorId": "act_mx_001", "characterName": "Other"})
    assert resp.status_code == 409
    assert resp.json()["existingRelation"]["characterName"] == "Julio Zapata"
    pairs = [(l["movieId"], l["actorId"]) for l in store.movie_actors]
    assert pairs.count(("mx_001", "act_mx_001")) == 1


def test_list_cast(client):
    body = client.get("/api/movies/mx_001/actors").json()
    assert body["movie"] == "Y tu mamá también"
    assert body["actorsCount"] == 2
    assert {a["name"]: a["characterName"] for a in body["actors"]} == {
        "Gael García Bernal": "Julio Zapata",
        "Diego Luna": "Tenoch Iturbide",
    }


def test_list_cast_unknown_movie(client):
    resp = client.get("/api/movies/nope/actors")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Movie not found", "movieId": "nope"}
