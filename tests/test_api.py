import random

AMY = {"name": "Amy", "sugar": 1, "milk": True}
BO = {"name": "Bo", "sugar": 0, "milk": False}


def seed(client, *prefs):
    for p in prefs:
        assert client.post("/api/preferences", json=p).status_code == 200


def test_empty_list_on_first_get(client, data_file):
    res = client.get("/api/preferences")
    assert res.status_code == 200
    assert res.json() == []
    assert data_file.exists()


def test_add_then_delete_example(client):
    res = client.post("/api/preferences", json=AMY)
    assert res.json() == [AMY]
    client.post("/api/preferences", json=BO)
    assert client.get("/api/preferences").json() == [AMY, BO]

    res = client.delete("/api/preferences/0")
    assert res.status_code == 200
    assert res.json() == [BO]


def test_post_appends_at_end(client):
    seed(client, AMY, BO)
    new = {"name": "Carol", "sugar": 3, "milk": True}
    client.post("/api/preferences", json=new)
    assert client.get("/api/preferences").json()[-1] == new


def test_post_invalid_payloads_rejected(client):
    seed(client, AMY)
    bad_payloads = [
        {"sugar": 1, "milk": True},
        {"name": "", "sugar": 1, "milk": True},
        {"name": "Eve", "sugar": "two", "milk": True},
        {"name": "Eve", "sugar": 1, "milk": "yes"},
        {"name": "Eve", "sugar": 1},
        {"name": "Eve", "sugar": -1, "milk": False},
        {"name": "Eve", "sugar": True, "milk": False},
        ["Eve", 1, True],
    ]
    for payload in bad_payloads:
        res = client.post("/api/preferences", json=payload)
        assert res.status_code == 400, payload
        assert res.json() == {"error": "Invalid input data"}
    assert client.get("/api/preferences").json() == [AMY]


def test_post_without_body_rejected(client):
    res = client.post("/api/preferences", content=b"not json", headers={"Content-Type": "application/json"})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid input data"}


def test_delete_invalid_index_rejected(client):
    seed(client, AMY, BO)
    for index in ("-1", "2", "99", "abc", "1.5", "1abc", "١", "²"):
        res = client.delete(f"/api/preferences/{index}")
        assert res.status_code == 400, index
        assert res.json() == {"error": "Invalid index"}
    assert client.get("/api/preferences").json() == [AMY, BO]


def test_delete_all(client):
    seed(client, AMY, BO, AMY)
    res = client.delete("/api/preferences/all")
    assert res.status_code == 200
    assert res.json() == []
    assert client.get("/api/preferences").json() == []


def test_delete_all_on_empty_store(client):
    assert client.delete("/api/preferences/all").json() == []


def test_corrupt_file_answers_500_and_server_keeps_serving(client, data_file):
    client.get("/api/preferences")
    data_file.write_text("[{broken")

    res = client.get("/api/preferences")
    assert res.status_code == 500
    assert res.json() == {"error": "Error reading preferences"}

    res = client.post("/api/preferences", json=AMY)
    assert res.status_code == 500
    assert res.json() == {"error": "Error adding preference"}

    res = client.delete("/api/preferences/0")
    assert res.status_code == 500
    assert res.json() == {"error": "Error removing person"}

    assert client.get("/health").json()["status"] == "unhealthy"

    # Clearing overwrites the broken file
    assert client.delete("/api/preferences/all").json() == []
    assert client.get("/api/preferences").json() == []


def test_spin_empty_store(client):
    res = client.get("/api/spin")
    assert res.status_code == 400
    assert res.json() == {"error": "No people available to spin."}


def test_spin_picks_stored_person(client, monkeypatch):
    seed(client, AMY, BO)
    monkeypatch.setattr(random, "randrange", lambda n: 1)
    res = client.get("/api/spin")
    assert res.status_code == 200
    assert res.json() == {
        "index": 1,
        "name": "Bo",
        "sugar": 0,
        "milk": False,
        "preferences": "Preferences: 0 sugars, without milk",
    }


def test_health_and_root(client):
    assert client.get("/health").json() == {"status": "healthy", "store": "readable"}
    root = client.get("/").json()
    assert root["name"] == "Tea Roulette"
    assert root["status"] == "running"
