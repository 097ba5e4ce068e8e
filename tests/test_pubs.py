from fermentato.database import SessionLocal
from fermentato.models import Pub

from conftest import HOP_GARDEN


def test_register_pub_grants_pub_owner(owner_client):
    pub = owner_client.pub
    assert pub["name"] == "The Hop Garden"
    assert pub["owner_id"] == owner_client.user["id"]
    assert pub["vat_number"] == "12345678901"
    assert pub["is_verified"] is False
    assert "pub_owner" in owner_client.get("/api/auth/roles").json()["roles"]


def test_register_pub_requires_business_identity(user_client):
    resp = user_client.post("/api/pubs", json={**HOP_GARDEN, "vat_number": "1234567890"})
    assert resp.status_code == 400
    assert any(e["field"] == "vat_number" for e in resp.json()["errors"])

    resp = user_client.post("/api/pubs", json={**HOP_GARDEN, "business_name": "   "})
    assert resp.status_code == 400

    resp = user_client.post("/api/pubs", json={**HOP_GARDEN, "website_url": "hopgarden.it"})
    assert resp.status_code == 400


def test_register_pub_requires_login(client):
    assert client.post("/api/pubs", json=HOP_GARDEN).status_code == 401


def test_pub_visible_in_list_and_my_pubs(owner_client, client):
    pub_id = owner_client.pub["id"]
    mine = owner_client.get("/api/my-pubs").json()
    assert [p["id"] for p in mine] == [pub_id]

    listing = client.get("/api/pubs").json()
    assert listing["total"] == 1
    assert listing["data"][0]["id"] == pub_id
    # Public views do not expose business details
    assert "vat_number" not in listing["data"][0]

    detail = client.get(f"/api/pubs/{pub_id}").json()
    assert detail["name"] == "The Hop Garden"
    assert "is_open_now" in detail


def test_get_missing_pub(client):
    assert client.get("/api/pubs/does-not-exist").status_code == 404


def test_inactive_pub_hidden_from_public(owner_client, client):
    pub_id = owner_client.pub["id"]
    with SessionLocal() as db:
        db.get(Pub, pub_id).is_active = False
        db.commit()
    assert client.get(f"/api/pubs/{pub_id}").status_code == 404
    assert client.get("/api/pubs").json()["total"] == 0
    assert owner_client.get(f"/api/pubs/{pub_id}").status_code == 200


def test_inactive_pub_lists_hidden_from_public(owner_client, client, user_client):
    pub_id = owner_client.pub["id"]
    with SessionLocal() as db:
        db.get(Pub, pub_id).is_active = False
        db.commit()
    for listing in ("taplist", "bottles", "menu"):
        url = f"/api/pubs/{pub_id}/{listing}"
        assert client.get(url).status_code == 404
        assert user_client.get(url).status_code == 404
        assert owner_client.get(url).status_code == 200


def test_update_pub_owner_only(owner_client, user_client):
    pub_id = owner_client.pub["id"]
    resp = owner_client.patch(f"/api/pubs/{pub_id}", json={
        "description": "Craft beer garden",
        "phone": "",
        "opening_hours": {"monday": {"open": "18:00", "close": "02:00"}},
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["description"] == "Craft beer garden"
    assert body["opening_hours"]["monday"]["close"] == "02:00"
    # Null fields are ignored
    assert body["name"] == "The Hop Garden"

    assert user_client.patch(f"/api/pubs/{pub_id}", json={"description": "x"}).status_code == 403


def test_update_pub_rejects_unknown_weekday(owner_client):
    resp = owner_client.patch(
        f"/api/pubs/{owner_client.pub['id']}",
        json={"opening_hours": {"funday": {"open": "18:00", "close": "23:00"}}},
    )
    assert resp.status_code == 400


def test_pub_ratings_average(owner_client, new_user):
    pub_id = owner_client.pub["id"]
    a, b = new_user(), new_user()
    assert a.post(f"/api/pubs/{pub_id}/ratings", json={"rating": 5}).json()["pub_rating"] == 5
    assert b.post(f"/api/pubs/{pub_id}/ratings", json={"rating": 4}).json()["pub_rating"] == 4.5
    # Re-rating replaces the user's previous rating
    assert a.post(f"/api/pubs/{pub_id}/ratings", json={"rating": 3}).json()["pub_rating"] == 3.5
    assert a.post(f"/api/pubs/{pub_id}/ratings", json={"rating": 6}).status_code == 400


def test_pub_search_requires_every_term(owner_client, client):
    assert client.get("/api/pubs/search", params={"q": "hop milano"}).json()["total"] == 1
    assert client.get("/api/pubs/search", params={"q": "hop roma"}).json()["total"] == 0
