import pytest

from web.app import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        client.post("/new_game", json={"side": 8})
        yield client


def test_state(client):
    data = client.get("/state").get_json()
    assert data["side"] == 8
    assert data["current_player"] == 1
    assert data["pieces"] == {"dark": 12, "light": 12}
    assert data["game_over"] is False


def test_select_and_move(client):
    res = client.post("/select", json={"square": "C3"})
    assert res.status_code == 200
    assert res.get_json()["destinations"] == ["B4", "D4"]
    assert res.get_json()["selected"] == "C3"

    res = client.post("/move", json={"square": "D4"})
    assert res.status_code == 200
    data = res.get_json()
    assert data["current_player"] == -1
    assert data["captured"] == []
    assert data["selected"] is None


def test_errors_are_reported(client):
    res = client.post("/select", json={"square": "B6"})
    assert res.status_code == 400
    assert res.get_json()["error"] == "InvalidSelection"

    res = client.post("/select", json={"square": "Z9"})
    assert res.status_code == 400
    assert res.get_json()["error"] == "InvalidCoordinate"

    client.post("/select", json={"square": "C3"})
    res = client.post("/move", json={"square": "C5"})
    assert res.status_code == 400
    assert res.get_json()["error"] == "IllegalDestination"


def test_cancel(client):
    client.post("/select", json={"square": "C3"})
    data = client.post("/cancel").get_json()
    assert data["selected"] is None
    assert data["destinations"] == []


def test_new_game_side(client):
    data = client.post("/new_game", json={"side": 10}).get_json()
    assert data["side"] == 10
    assert data["pieces"] == {"dark": 20, "light": 20}
    assert client.post("/new_game", json={"side": 3}).status_code == 400


def test_new_game_rejects_non_numeric_side(client):
    for side in (None, [8], "eight"):
        res = client.post("/new_game", json={"side": side})
        assert res.status_code == 400
        assert res.get_json()["error"] == "ValueError"
    assert client.get("/state").get_json()["side"] == 8
