def test_log_and_update_tasting(user_client, beer_id, owner_client):
    resp = user_client.post("/api/tastings", json={
        "beer_id": beer_id, "rating": 4, "format": "bottiglia", "pub_id": owner_client.pub["id"],
    })
    assert resp.status_code == 201
    tasting = resp.json()
    assert tasting["format"] == "bottiglia"
    assert tasting["pub_name"] == "The Hop Garden"

    # Same beer again updates the existing row
    again = user_client.post("/api/tastings", json={"beer_id": beer_id, "rating": 5})
    assert again.status_code == 200
    assert again.json()["id"] == tasting["id"]
    assert again.json()["rating"] == 5
    assert len(user_client.get("/api/tastings").json()) == 1


def test_default_format_and_patch(user_client, beer_id):
    tasting = user_client.post("/api/tastings", json={"beer_id": beer_id}).json()
    assert tasting["format"] == "spina"
    resp = user_client.patch(f"/api/tastings/{tasting['id']}", json={
        "format": "lattina", "personal_notes": "Erbacea",
    })
    assert resp.status_code == 200
    assert resp.json()["format"] == "lattina"
    assert resp.json()["personal_notes"] == "Erbacea"


def test_tasting_owner_only(user_client, new_user, beer_id):
    tasting = user_client.post("/api/tastings", json={"beer_id": beer_id}).json()
    other = new_user()
    assert other.patch(f"/api/tastings/{tasting['id']}", json={"rating": 1}).status_code == 403
    assert other.delete(f"/api/tastings/{tasting['id']}").status_code == 403
    assert user_client.delete(f"/api/tastings/{tasting['id']}").status_code == 204
    assert user_client.get("/api/tastings").json() == []


def test_tasting_validation(user_client, beer_id):
    assert user_client.post("/api/tastings", json={"beer_id": "missing"}).status_code == 404
    assert user_client.post("/api/tastings", json={"beer_id": beer_id, "rating": 0}).status_code == 400
    assert user_client.post("/api/tastings", json={"beer_id": beer_id, "format": "keg"}).status_code == 400
