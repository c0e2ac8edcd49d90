"""Integration tests for /service."""
import pytest


@pytest.mark.integration
def test_create_then_duplicate(client):
    payload = {"title": "Haircut", "description": "Classic cut", "price": 20, "barberID": "barber-x"}

    first = client.post("/service", json=payload)
    assert first.status_code == 201
    data = first.json()
    assert data["title"] == "Haircut"
    assert data["message"] == "Service created successfully."
    assert data["_id"]

    second = client.post("/service", json=payload)
    assert second.status_code == 409
    assert second.json() == {"message": "A service with the same title already exists."}

    listed = client.get("/service", params={"_id": "barber-x"})
    assert len(listed.json()) == 1


@pytest.mark.integration
def test_list_services_answers_201(client):
    client.post("/service", json={"title": "Shave", "price": "12.5", "length": "20 min", "barberID": "b1"})
    client.post("/service", json={"title": "Beard", "price": 8, "barberID": "b2"})

    response = client.get("/service", params={"_id": "b1"})

    assert response.status_code == 201
    (service,) = response.json()
    assert service["title"] == "Shave"
    assert service["price"] == 12.5
    assert service["length"] == "20 min"
    assert service["barberID"] == "b1"


@pytest.mark.integration
def test_create_service_requires_title_and_price(client):
    assert client.post("/service", json={"barberID": "b1", "price": 5}).status_code == 422
    assert client.post("/service", json={"barberID": "b1", "title": "Cut"}).status_code == 422


@pytest.mark.integration
def test_delete_service(client):
    created = client.post("/service", json={"title": "Fade", "price": 30, "barberID": "b1"}).json()

    response = client.request("DELETE", "/service", json={"serviceID": created["_id"]})
    assert response.status_code == 200
    assert client.get("/service", params={"_id": "b1"}).json() == []

    again = client.request("DELETE", "/service", json={"serviceID": created["_id"]})
    assert again.status_code == 404
