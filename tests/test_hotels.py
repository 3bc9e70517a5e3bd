from conftest import HOTEL


def create_hotel(client, **overrides):
    response = client.post("/api/hotels", json={**HOTEL, **overrides})
    assert response.status_code == 201
    return response.json()["hotel_id"]


def test_hotel_lifecycle(client):
    res = client.post("/api/hotels", json=HOTEL)
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Hotel added successfully"
    hotel_id = body["hotel_id"]

    res = client.get("/api/hotels")
    assert res.status_code == 200
    assert [h["id"] for h in res.json()] == [hotel_id]

    res = client.put(f"/api/hotels/{hotel_id}", json={"price_per_night": 120})
    assert res.status_code == 200
    assert res.json()["message"] == "Hotel updated successfully"
    assert res.json()["hotel"]["price_per_night"] == 120
    assert res.json()["hotel"]["rating"] == 4.5

    res = client.delete(f"/api/hotels/{hotel_id}")
    assert res.status_code == 200
    assert res.json() == {"message": "Hotel deleted successfully"}

    res = client.get(f"/api/hotels/{hotel_id}")
    assert res.status_code == 404
    assert res.json() == {"error": "Hotel not found"}


def test_read_one_matches_supplied_fields(client):
    hotel_id = create_hotel(client)
    assert client.get(f"/api/hotels/{hotel_id}").json() == {"id": hotel_id, **HOTEL}


def test_identifiers_are_fresh(client):
    ids = {create_hotel(client, name=f"Hotel {i}") for i in range(5)}
    assert len(ids) == 5


def test_empty_collection_is_404(client):
    res = client.get("/api/hotels")
    assert res.status_code == 404
    assert res.json() == {"error": "No hotels found"}


def test_missing_field_rejected(client):
    payload = {k: v for k, v in HOTEL.items() if k != "source"}
    res = client.post("/api/hotels", json=payload)
    assert res.status_code == 400
    assert res.json() == {"error": "All fields are required"}


def test_zero_price_counts_as_missing_on_create(client):
    res = client.post("/api/hotels", json={**HOTEL, "price_per_night": 0})
    assert res.status_code == 400


def test_duplicate_name_and_address_conflict(client):
    create_hotel(client)
    res = client.post("/api/hotels", json={**HOTEL, "price_per_night": 80})
    assert res.status_code == 400
    assert res.json() == {"error": "Hotel already exists"}


def test_same_name_other_address_allowed(client):
    create_hotel(client)
    create_hotel(client, address="2 Side St")
    assert len(client.get("/api/hotels").json()) == 2


def test_partial_update_leaves_other_fields(client):
    hotel_id = create_hotel(client)
    before = client.get(f"/api/hotels/{hotel_id}").json()
    client.put(f"/api/hotels/{hotel_id}", json={"source": "partner"})
    after = client.get(f"/api/hotels/{hotel_id}").json()
    assert after == {**before, "source": "partner"}


def test_falsy_update_values_are_ignored(client):
    hotel_id = create_hotel(client)
    res = client.put(
        f"/api/hotels/{hotel_id}",
        json={"rating": 0, "price_per_night": 0, "name": ""},
    )
    assert res.status_code == 200
    hotel = res.json()["hotel"]
    assert hotel["rating"] == 4.5
    assert hotel["price_per_night"] == 100
    assert hotel["name"] == "Grand"


def test_update_can_create_duplicate_pair(client):
    """Uniqueness is only enforced at creation."""
    create_hotel(client)
    other_id = create_hotel(client, name="Other")
    res = client.put(f"/api/hotels/{other_id}", json={"name": "Grand"})
    assert res.status_code == 200
    names = [h["name"] for h in client.get("/api/hotels").json()]
    assert names == ["Grand", "Grand"]


def test_update_missing_hotel(client):
    res = client.put("/api/hotels/nope", json={"name": "X"})
    assert res.status_code == 404
    assert res.json() == {"error": "Hotel not found"}


def test_delete_twice(client):
    hotel_id = create_hotel(client)
    assert client.delete(f"/api/hotels/{hotel_id}").status_code == 200
    res = client.delete(f"/api/hotels/{hotel_id}")
    assert res.status_code == 404
    assert res.json() == {"error": "Hotel not found"}


def test_update_without_body_changes_nothing(client):
    hotel_id = create_hotel(client)
    res = client.put(f"/api/hotels/{hotel_id}")
    assert res.status_code == 200
    assert res.json()["hotel"] == {"id": hotel_id, **HOTEL}


def test_update_without_body_on_missing_hotel(client):
    res = client.put("/api/hotels/nope")
    assert res.status_code == 404
    assert res.json() == {"error": "Hotel not found"}
