"""Owner journey: register a pub, put a beer on tap, customers see it."""
from fastapi.testclient import TestClient

from fermentato.main import app

from conftest import HOP_GARDEN, PASSWORD


def test_register_pub_and_pour_first_beer():
    owner = TestClient(app)
    resp = owner.post("/api/auth/register", json={"email": "oste@hopgarden.it", "password": PASSWORD})
    assert resp.status_code == 201

    pub = owner.post("/api/pubs", json=HOP_GARDEN).json()
    assert pub["city"] == "Milano"
    assert [p["id"] for p in owner.get("/api/my-pubs").json()] == [pub["id"]]

    visitor = TestClient(app)
    assert [p["name"] for p in visitor.get("/api/pubs").json()["data"]] == ["The Hop Garden"]

    beer = owner.post("/api/beers", json={
        "name": "Tipopils", "style": "Italian Pilsner", "brewery_name": "Birrificio Italiano",
    }).json()
    tap = owner.post(f"/api/pubs/{pub['id']}/taplist", json={
        "beer_id": beer["id"], "tap_number": 1, "prices": [{"size": "0.4L", "price": 6.50}],
    })
    assert tap.status_code == 201

    taplist = visitor.get(f"/api/pubs/{pub['id']}/taplist").json()
    assert len(taplist) == 1
    assert taplist[0]["beer"]["name"] == "Tipopils"
    assert taplist[0]["tap_number"] == 1
    assert taplist[0]["display_price"] == 6.5

    # Customers cannot touch someone else's tap list
    customer = TestClient(app)
    customer.post("/api/auth/register", json={"email": "cliente@example.com", "password": PASSWORD})
    resp = customer.post(f"/api/pubs/{pub['id']}/taplist", json={"beer_id": beer["id"], "tap_number": 2})
    assert resp.status_code == 403
