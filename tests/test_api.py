from unittest.mock import patch

from fastapi.testclient import TestClient

from app.services.hotels import HotelHandler


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_openapi_lists_resources(client):
    paths = client.get("/openapi.json").json()["paths"]
    for path in ("/api/users/register", "/api/users/login", "/api/hotels", "/api/restaurants/{item_id}", "/api/transport", "/api/itinerary/{item_id}"):
        assert path in paths


def test_wrong_types_become_400(client):
    res = client.post("/api/hotels", json={"name": "Grand", "price_per_night": "cheap"})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request body"}


def test_malformed_json_becomes_400(client):
    res = client.post(
        "/api/hotels", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request body"}


def test_unexpected_error_is_generic(app):
    """Exceptions are sanitized."""
    client = TestClient(app, raise_server_exceptions=False)
    with patch.object(HotelHandler, "list_all", side_effect=RuntimeError("db exploded: secret detail")):
        res = client.get("/api/hotels")
    assert res.status_code == 500
    assert res.json() == {"error": "Something went wrong"}
    assert "secret" not in res.text


def test_apps_do_not_share_state(app):
    from app.main import create_app

    first = TestClient(app)
    second = TestClient(create_app())
    first.post("/api/users/register", json={"username": "a", "email": "a@example.com", "password": "pw"})
    assert len(first.get("/api/users").json()) == 1
    assert second.get("/api/users").json() == []


def test_non_finite_number_rejected(client):
    """NaN is accepted by the JSON parser but must never reach a store."""
    body = b'{"name":"G","price_per_night":NaN,"rating":4,"address":"1 Main St","source":"demo"}'
    res = client.post("/api/hotels", content=body, headers={"Content-Type": "application/json"})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request body"}

    res = client.post(
        "/api/transport",
        content=b'{"type":"taxi","name":"Cab","price":Infinity,"availability":true}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400

    res = client.get("/api/hotels")
    assert res.status_code == 404
    assert res.json() == {"error": "No hotels found"}


def test_non_finite_number_rejected_on_update(client):
    hotel_id = client.post(
        "/api/hotels",
        json={"name": "G", "price_per_night": 100, "rating": 4.5, "address": "1 Main St", "source": "demo"},
    ).json()["hotel_id"]
    res = client.put(
        f"/api/hotels/{hotel_id}",
        content=b'{"rating":NaN}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert client.get("/api/hotels").status_code == 200
    assert client.get(f"/api/hotels/{hotel_id}").json()["rating"] == 4.5


def test_mistyped_values_are_not_coerced(client):
    res = client.post(
        "/api/hotels",
        json={"name": "G", "price_per_night": "100", "rating": 4.5, "address": "1 Main St", "source": "demo"},
    )
    assert res.status_code == 400
    res = client.post(
        "/api/hotels",
        json={"name": "G", "price_per_night": 100, "rating": True, "address": "1 Main St", "source": "demo"},
    )
    assert res.status_code == 400
    res = client.post(
        "/api/transport",
        json={"type": "taxi", "name": "Cab", "price": 20, "availability": "yes"},
    )
    assert res.status_code == 400
    assert client.get("/api/hotels").status_code == 404
